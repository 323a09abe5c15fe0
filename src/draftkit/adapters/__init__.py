"""Bindings between draftkit and concrete UI toolkits."""
