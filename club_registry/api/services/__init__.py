# This file marks the services package holding the SQL behind each resource router.
