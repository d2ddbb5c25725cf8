"""Routing — load controllers, partition routes, build path helpers, register.

The pipeline runs once per ``resolve()`` call and keeps no state between
calls.
"""
