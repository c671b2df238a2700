#!/usr/bin/env python3
"""Example: Temporal role containment

Demonstrates time-windowed links, depth-bounded inheritance, and the
structural introspection helpers.

Usage:
    python examples/01_quickstart.py

Requirements:
    pip install temporal-rbac
"""
from __future__ import annotations

import logging

import temporal_rbac
from temporal_rbac import SessionRoleManager


def main() -> None:
    logging.basicConfig(level=logging.INFO, format="%(message)s")
    print(f"temporal-rbac version: {temporal_rbac.__version__}")

    rm = SessionRoleManager(max_hierarchy_level=2)
    rm.add_link("alice", "oncall", "2024-03-01T00:00", "2024-03-07T23:59")
    rm.add_link("oncall", "prod-admin", "2024-01-01T00:00", "2024-12-31T23:59")
    rm.add_link("prod-admin", "billing", "2024-01-01T00:00", "2024-12-31T23:59")

    for when in ("2024-03-03T12:00", "2024-03-10T12:00"):
        print(f"alice contains prod-admin at {when}: {rm.has_link('alice', 'prod-admin', when)}")

    # Three hops is beyond the configured depth of two.
    print(f"alice contains billing: {rm.has_link('alice', 'billing', '2024-03-03T12:00')}")

    print(f"direct roles of alice: {rm.get_roles('alice')}")
    print(f"direct holders of prod-admin: {rm.get_users('prod-admin')}")

    rm.delete_link("alice", "oncall")
    print(f"after delete: {rm.has_link('alice', 'oncall', '2024-03-03T12:00')}")

    rm.print_roles()


if __name__ == "__main__":
    main()
