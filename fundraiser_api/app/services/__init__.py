"""
Service layer abstraction.

Services hold the domain rules of the fundraiser: counter arithmetic,
the pot and the tier catalogs.  They operate on plain state
dictionaries and never touch the storage, so the API handlers decide
when to read and persist.
"""
