"""Cyclic-instruction walks over a two-way node network."""
