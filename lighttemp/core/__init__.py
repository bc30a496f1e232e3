"""lighttemp.core — Foundation layer.

Contains the value types, error taxonomy, hex decoder, colour temperature
estimator, average colour extractor, RAW loader, settings and report builder.
This module has NO dependencies on lighttemp.techniques or lighttemp.registry.
Only stdlib, numpy, PIL and rawpy are allowed here.
"""
