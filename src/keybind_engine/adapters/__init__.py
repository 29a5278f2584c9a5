"""Input source adapters for host toolkits.

Each adapter lives in its own subpackage so importing one never pulls in
another toolkit.
"""
