# This file marks the routers package for API route modules.
# The package groups endpoint modules by resource: students, clubs, registrations, and health.
