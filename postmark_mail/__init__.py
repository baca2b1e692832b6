"""Postmark transactional email client and provider adapter."""

__version__ = '0.1.0'
