"""Tests for suite-runner.

Covers registration, filtering, execution, reporting,
configuration, module loading and the CLI.
"""
