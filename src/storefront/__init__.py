"""Storefront - e-commerce backend for customers and their products.

Customers register and log in to receive a signed token, list their own
inventory or browse everyone else's, and manage the products they sell.
"""

__version__ = "0.1.0"
