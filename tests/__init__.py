"""Test package for the WPM trainer.

Core engine tests drive the typing test with a fake clock and never import
pygame. The smoke tests run the pygame shell headlessly using SDL's dummy
video driver. To run these tests, execute ``pytest`` from the project root.
"""
