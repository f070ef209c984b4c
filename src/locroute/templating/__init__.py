"""Kida template integration — localized path filters and globals."""
