import os
import sys

# Make the project importable without installing it
sys.path.append(os.path.abspath(os.path.join(os.path.dirname(__file__), '..')))
