"""
Demo bounded context, domain layer.

A single placeholder entity with two attributes, used to exercise the
controller, service and repository layers end to end.
"""
