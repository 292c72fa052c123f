"""End-to-end tests.

Purpose
- Drive the installed `enlist` command the way a user would.

Guidelines
- Invoke through Click's CliRunner inside an isolated filesystem.
- Assert on stdout, stderr, exit status and files written.
"""
