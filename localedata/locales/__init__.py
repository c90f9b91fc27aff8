"""Locale package for CLDR display-name JSON resources.

Tables live in one sub-directory per kind (currency_names, locale_names,
timezone_names), one ``<locale>.json`` file each, and are accessed via
importlib.resources. Keeping this as a real package ensures the resources
are discoverable both locally and when installed.
"""
