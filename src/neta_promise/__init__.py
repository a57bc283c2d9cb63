"""Neta Promise: public promise tracking with anonymous daily voting."""
