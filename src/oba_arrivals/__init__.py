"""OneBusAway arrivals proxy: fan-out, normalize and merge stop predictions."""

__version__ = "0.1.0"
