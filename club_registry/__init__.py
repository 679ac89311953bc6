"""
Club registry service: students, clubs, and club registrations over a relational store.
Most functionality lives in the `api` package; this file stays lightweight.
"""
