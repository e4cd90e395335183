"""Boarding house management service."""
