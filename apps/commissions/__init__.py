"""Commissions app package.

Pure commission arithmetic over booking items and the partner (broker /
agency) commission summaries built on top of it.
"""
