"""Listing domain - equipment, material and contractor catalog"""
