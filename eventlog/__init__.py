"""
EventLog — Append-Only Event Log
==================================
Timestamped messages, indexed by submitter and category,
queried by id, recency, and time range.

The store holds truth. Everything else is a host-side collaborator.
"""
