#!/usr/bin/env python3
"""
System DNS - Main Entry Point

This is the main entry point for the system-dns CLI.
It can be run directly or imported as a module.
"""

from system_dns.cli.main import main

if __name__ == "__main__":
    main()
