"""
Shared, cross-cutting code for the API.

`core/` holds small building blocks that several features use (DB wiring,
error taxonomy, settings, logging, provider HTTP clients). Keep entity SQL
and business rules in the corresponding feature package (e.g. `countries/`).
"""
