"""BuildConnect marketplace API"""
