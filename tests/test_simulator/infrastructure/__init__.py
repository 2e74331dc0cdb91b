"""Tick loop tests"""
