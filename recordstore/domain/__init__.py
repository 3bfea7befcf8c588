"""
Domain layer - Items and errors.

This layer contains the record envelope persisted by repositories and the
exceptions raised by every layer, independent of storage or codec concerns.
"""
