"""Analysis techniques, one per module.

A module that defines a `technique` object is picked up by
lighttemp.registry.discover(); its docstring is the `lighttemp help` text.
"""
