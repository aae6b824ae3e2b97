"""
GPS fleet data loader: taxis and trajectories from CSV into PostgreSQL
"""
__version__ = "1.0.0"
