"""Booking domain - order placement, confirmation email, cancellation"""
