"""Tuiter: users and tuits over HTTP with session auth."""
