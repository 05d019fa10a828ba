"""Collaborator seams of the select prompt: capabilities, theme, keys, protocols."""
