"""
Shared, cross-cutting code for the API.

`core/` should contain small building blocks that every feature uses
(DB wiring, schema migration, settings, logging, error mapping). Keep
feature-specific SQL and business logic in the corresponding feature package
(e.g. `users/`).
"""
