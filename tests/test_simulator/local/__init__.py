"""Local engine tests"""
