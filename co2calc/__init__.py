"""
co2calc – Trip CO₂ emission calculator.

Looks up road distances between Brazilian cities, applies per-km emission
factors for each transport mode, compares every mode against the car
baseline, and estimates the carbon credits needed to offset a trip.
"""
