"""Inspection command line interface."""
