"""Integrations with third-party graph libraries."""

from __future__ import annotations

from pathtrace.lib.nx import reference_cost, to_networkx

__all__ = ["reference_cost", "to_networkx"]
