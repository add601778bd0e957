"""Interactive prompts for hunt"""
