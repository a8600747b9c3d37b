"""Classic data structures and algorithms: sorting, searching, lists, stacks, queues, trees and graphs."""

__version__ = "0.1.0"