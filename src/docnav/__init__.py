"""Docnav - navigation trees and page links for documentation sites."""
