"""
Social Accounts: root package.

User records for a social application: profile fields, follow graph and
password credentials (bcrypt hashes, validated and hashed before every
MongoDB write). Layout follows domain / application / infrastructure layers
wired together by the DI container in ``di``.
"""
