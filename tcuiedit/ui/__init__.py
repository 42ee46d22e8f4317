"""Trigger UI definition entries: categories, types, parameters, functions and strings."""