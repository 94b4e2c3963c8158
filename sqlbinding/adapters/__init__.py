"""Reference statement executors.

Import ``sqlbinding.adapters.sqlite`` or ``sqlbinding.adapters.aiosqlite`` directly.
"""
