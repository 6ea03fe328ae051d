"""Equalizer filter types, biquad math, BLE payload encoding, response plots, remote-control models and configuration for a software DSP audio service."""

__version__ = "0.8.0"