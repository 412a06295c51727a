"""
Discord client, configuration, database and language loading.
"""
