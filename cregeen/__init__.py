"""Parsing of Cregeen's Manx dictionary entries."""
