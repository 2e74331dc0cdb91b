"""Simulator tests"""
