"""Helpers shared by the command line and web front ends."""
