"""Core components for the pyuserval library.

This package contains the building blocks of the validation engine: the
error taxonomy, the settings record, the base class for all rules, the
validator that runs the rule chains, its builder, and the configuration
manager.
"""
