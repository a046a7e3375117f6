"""User domain - registration"""
