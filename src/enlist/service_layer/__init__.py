"""Service layer for ENLIST.

Implements application use-cases: the registration workflow, command
handlers, and the message bus that routes commands to them. Depends only on
the contracts in `enlist.interfaces`.

Dependency rule: may import `enlist.domain` and `enlist.interfaces`, but not
`enlist.adapters` or `enlist.entrypoints`.
"""
