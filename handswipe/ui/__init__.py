"""Consumers of the gesture flags"""
