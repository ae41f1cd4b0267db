"""Test package for the forest fire simulation."""
