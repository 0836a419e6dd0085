"""Workova - local services marketplace backend."""
