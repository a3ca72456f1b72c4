"""Shared kernel: constants, exceptions and newtypes."""
