"""Astronum - the asteroid equation captcha."""
