#!/usr/bin/env python3

from divider.cli import main

if __name__ == '__main__':
    main()
