"""Adapters: user interface and operational CLIs."""
