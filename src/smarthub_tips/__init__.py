"""SmartHub Tips: betting tip dashboard for football and NBA matches."""

__version__ = "0.1.0"
