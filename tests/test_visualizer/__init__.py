"""Status API tests"""
