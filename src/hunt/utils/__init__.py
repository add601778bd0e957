"""Utility modules for hunt"""
