"""Shared pieces of the item handlers: table access, HTTP helpers, errors."""

import logging

# The Lambda runtime installs a root handler; only the level needs raising.
logging.getLogger().setLevel(logging.INFO)
