# sql/queries.py
"""
SQL statements for taxi and trajectory loads
"""

# Taxi operations
SELECT_TAXI_IDS = """
SELECT id FROM api.taxis
"""

COPY_TAXIS = """
COPY api.taxis (id, plate) FROM STDIN WITH (FORMAT csv)
"""

# Trajectory operations
INSERT_TRAJECTORIES = """
INSERT INTO api.trajectories (taxi_id, date, latitude, longitude) VALUES %s
"""
