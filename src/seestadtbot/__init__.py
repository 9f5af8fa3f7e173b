"""Seestadt.bot: voice answers for public transit and shops in Aspern Seestadt."""

__version__ = "0.1.0"
