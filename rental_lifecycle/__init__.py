"""Rental application and tenancy registry lifecycle service."""
