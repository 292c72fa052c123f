"""Entrypoints (inbound adapters) for ENLIST.

Expose the application to the outside world through CLI commands. Parse
inputs, dispatch commands through the message bus built by
`enlist.bootstrap`, and present results.

Dependency rule: may import `enlist.service_layer` and `enlist.bootstrap`;
avoid importing `enlist.adapters` directly.
"""
