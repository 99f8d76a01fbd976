"""Routing — ordered route table with ``/:param`` templates.

Routes are registered during setup and frozen when the app starts
serving.
"""
