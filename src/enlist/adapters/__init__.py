"""Adapters (infrastructure) for ENLIST.

Provide concrete implementations of the interfaces the service layer depends
on: in-memory user repository and newsletter service, a stdlib-logging
structured logger, a raising error channel, ID generators and a redactor.

Dependency rule: may import `enlist.domain` and `enlist.interfaces`; the
domain must not import this package.
"""
