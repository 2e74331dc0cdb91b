"""Configuration tests"""
