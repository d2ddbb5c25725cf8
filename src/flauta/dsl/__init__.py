"""Route declaration DSL — verb builders, namespaces and resources.

Builders are pure: they return frozen ``Route`` values (or nested lists of
them) and load nothing.  ``flauta.routing`` resolves the result.
"""
