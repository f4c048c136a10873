#!/usr/bin/env python3
"""
Main entry point for running PR Assistant as a module
Enables: python -m pr_assistant <workflow> <args>
"""

from .main import main

if __name__ == "__main__":
    main()
