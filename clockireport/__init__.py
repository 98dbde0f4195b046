"""
clockiReport: a CLI tool printing the tasks tracked in Clockify on a given day.

- Fetches the user's time entries for one day from the Clockify API
- Prints each distinct task description once, sorted, under a dated header
- Can be used as a CLI (via `python -m clockireport` or `clockireport` if installed as a package)
"""

__version__ = "0.1.0"
