"""
Runtime Module

Entry point for inspecting graph definitions.
"""
