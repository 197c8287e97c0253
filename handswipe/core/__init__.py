"""Configuration and shared helpers"""
