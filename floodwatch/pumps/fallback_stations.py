"""
Fallback station inventory used when the station store is unavailable or empty.

Real infrastructure identities and coordinates, in the same snake_case record
shape the store returns. Status is not part of the table: the catalog assigns
a placeholder at load time.
"""

FALLBACK_STATIONS: list[dict] = [
    # Chicago - MWRD Tunnel and Reservoir Plan
    {"id": "chi-1", "code": "CHI-TARP-01", "name": "Thornton Composite Reservoir", "city": "Chicago", "state": "IL",
     "latitude": 41.6825, "longitude": -87.6106, "pump_type": "drainage_basin", "capacity_gpm": 1_000_000,
     "operator": "MWRD Greater Chicago"},
    {"id": "chi-2", "code": "CHI-TARP-02", "name": "Mainstream Pump Station", "city": "Chicago", "state": "IL",
     "latitude": 41.8781, "longitude": -87.6298, "pump_type": "drainage_basin", "capacity_gpm": 500_000,
     "operator": "MWRD Greater Chicago"},
    {"id": "chi-3", "code": "CHI-LAKE-01", "name": "Lake Shore Drive Pump Station", "city": "Chicago", "state": "IL",
     "latitude": 41.9107, "longitude": -87.6278, "pump_type": "stormwater", "operator": "Chicago DOT"},
    {"id": "chi-4", "code": "CHI-OHARE", "name": "O'Hare Reservoir", "city": "Chicago", "state": "IL",
     "latitude": 41.9742, "longitude": -87.9073, "pump_type": "drainage_basin", "capacity_gpm": 350_000,
     "operator": "MWRD Greater Chicago"},
    {"id": "chi-5", "code": "CHI-MCCOOK", "name": "McCook Reservoir", "city": "Chicago", "state": "IL",
     "latitude": 41.8103, "longitude": -87.8312, "pump_type": "drainage_basin", "capacity_gpm": 450_000,
     "operator": "MWRD Greater Chicago"},

    # New Orleans - SWBNO drainage pumping stations
    {"id": "nola-1", "code": "DPS-01", "name": "Drainage Pump Station 01", "city": "New Orleans", "state": "LA",
     "latitude": 29.9704, "longitude": -90.1069, "pump_type": "drainage_basin", "capacity_gpm": 150_000,
     "operator": "SWBNO"},
    {"id": "nola-2", "code": "DPS-02", "name": "Drainage Pump Station 02", "city": "New Orleans", "state": "LA",
     "latitude": 29.9612, "longitude": -90.1145, "pump_type": "drainage_basin", "operator": "SWBNO"},
    {"id": "nola-3", "code": "DPS-03", "name": "Drainage Pump Station 03", "city": "New Orleans", "state": "LA",
     "latitude": 29.9856, "longitude": -90.1089, "pump_type": "drainage_basin", "operator": "SWBNO"},
    {"id": "nola-4", "code": "DPS-04", "name": "Drainage Pump Station 04", "city": "New Orleans", "state": "LA",
     "latitude": 29.9723, "longitude": -90.0989, "pump_type": "drainage_basin", "operator": "SWBNO"},
    {"id": "nola-6", "code": "DPS-06", "name": "Drainage Pump Station 06", "city": "New Orleans", "state": "LA",
     "latitude": 29.9889, "longitude": -90.1131, "pump_type": "drainage_basin", "capacity_gpm": 180_000,
     "operator": "SWBNO"},
    {"id": "nola-7", "code": "DPS-07", "name": "Drainage Pump Station 07", "city": "New Orleans", "state": "LA",
     "latitude": 29.9534, "longitude": -90.0834, "pump_type": "drainage_basin", "operator": "SWBNO"},
    {"id": "nola-11", "code": "DPS-11", "name": "Drainage Pump Station 11", "city": "New Orleans", "state": "LA",
     "latitude": 29.9445, "longitude": -90.0723, "pump_type": "drainage_basin", "operator": "SWBNO"},
    {"id": "nola-12", "code": "DPS-12", "name": "Drainage Pump Station 12", "city": "New Orleans", "state": "LA",
     "latitude": 29.9278, "longitude": -90.0656, "pump_type": "drainage_basin", "operator": "SWBNO"},
    {"id": "nola-15", "code": "DPS-15", "name": "Drainage Pump Station 15", "city": "New Orleans", "state": "LA",
     "latitude": 30.0156, "longitude": -90.0445, "pump_type": "drainage_basin", "operator": "SWBNO"},
    {"id": "nola-17", "code": "DPS-17", "name": "Drainage Pump Station 17", "city": "New Orleans", "state": "LA",
     "latitude": 29.9789, "longitude": -90.0234, "pump_type": "drainage_basin", "operator": "SWBNO"},

    # Miami Beach
    {"id": "mia-1", "code": "MIA-STA-A", "name": "Stormwater Pump Station A", "city": "Miami Beach", "state": "FL",
     "latitude": 25.7907, "longitude": -80.1300, "pump_type": "stormwater", "operator": "Miami Beach Public Works"},
    {"id": "mia-2", "code": "MIA-STA-B", "name": "Stormwater Pump Station B", "city": "Miami Beach", "state": "FL",
     "latitude": 25.8123, "longitude": -80.1289, "pump_type": "stormwater", "operator": "Miami Beach Public Works"},
    {"id": "mia-3", "code": "MIA-STA-C", "name": "Stormwater Pump Station C", "city": "Miami Beach", "state": "FL",
     "latitude": 25.7745, "longitude": -80.1334, "pump_type": "stormwater", "operator": "Miami Beach Public Works"},
    {"id": "mia-4", "code": "MIA-SUNSET", "name": "Sunset Harbour Pump Station", "city": "Miami Beach", "state": "FL",
     "latitude": 25.7856, "longitude": -80.1423, "pump_type": "stormwater", "operator": "Miami Beach Public Works"},
    {"id": "mia-5", "code": "MIA-NORTH", "name": "North Beach Pump Station", "city": "Miami Beach", "state": "FL",
     "latitude": 25.8534, "longitude": -80.1245, "pump_type": "stormwater", "operator": "Miami Beach Public Works"},

    # Houston - Harris County Flood Control
    {"id": "htx-1", "code": "HTX-BRAYS", "name": "Brays Bayou Pump Station", "city": "Houston", "state": "TX",
     "latitude": 29.6960, "longitude": -95.4089, "pump_type": "drainage_basin", "capacity_gpm": 200_000,
     "operator": "Harris County Flood Control"},
    {"id": "htx-2", "code": "HTX-WHITE-OAK", "name": "White Oak Bayou Pump Station", "city": "Houston", "state": "TX",
     "latitude": 29.8012, "longitude": -95.4023, "pump_type": "drainage_basin",
     "operator": "Harris County Flood Control"},
    {"id": "htx-3", "code": "HTX-GREENS", "name": "Greens Bayou Pump Station", "city": "Houston", "state": "TX",
     "latitude": 29.8745, "longitude": -95.2534, "pump_type": "drainage_basin",
     "operator": "Harris County Flood Control"},
    {"id": "htx-4", "code": "HTX-SIMS", "name": "Sims Bayou Pump Station", "city": "Houston", "state": "TX",
     "latitude": 29.6534, "longitude": -95.2867, "pump_type": "drainage_basin",
     "operator": "Harris County Flood Control"},
    {"id": "htx-5", "code": "HTX-BUFFALO", "name": "Buffalo Bayou Pump Station", "city": "Houston", "state": "TX",
     "latitude": 29.7589, "longitude": -95.4012, "pump_type": "drainage_basin",
     "operator": "Harris County Flood Control"},

    # New York City - DEP coastal defense
    {"id": "nyc-1", "code": "NYC-CONEY", "name": "Coney Island Pump Station", "city": "Brooklyn", "state": "NY",
     "latitude": 40.5755, "longitude": -73.9707, "pump_type": "coastal_defense", "operator": "NYC DEP"},
    {"id": "nyc-2", "code": "NYC-RED-HOOK", "name": "Red Hook Pump Station", "city": "Brooklyn", "state": "NY",
     "latitude": 40.6745, "longitude": -74.0089, "pump_type": "coastal_defense", "operator": "NYC DEP"},
    {"id": "nyc-3", "code": "NYC-ROCKAWAYS", "name": "Rockaway Beach Pump Station", "city": "Queens", "state": "NY",
     "latitude": 40.5845, "longitude": -73.8156, "pump_type": "coastal_defense", "operator": "NYC DEP"},
    {"id": "nyc-4", "code": "NYC-HUNTS-PT", "name": "Hunts Point Pump Station", "city": "Bronx", "state": "NY",
     "latitude": 40.8123, "longitude": -73.8867, "pump_type": "stormwater", "operator": "NYC DEP"},

    # Norfolk
    {"id": "nfk-1", "code": "NFK-HAGUE", "name": "Hague Pump Station", "city": "Norfolk", "state": "VA",
     "latitude": 36.8508, "longitude": -76.2859, "pump_type": "coastal_defense", "operator": "Norfolk Public Works"},

    # Boston - Charles River and Boston Harbor
    {"id": "bos-1", "code": "BOS-DEER-01", "name": "Deer Island Pump Station", "city": "Boston", "state": "MA",
     "latitude": 42.3423, "longitude": -70.9645, "pump_type": "coastal_defense", "capacity_gpm": 300_000,
     "operator": "MWRA"},
    {"id": "bos-2", "code": "BOS-ALEWIFE", "name": "Alewife Brook Pump Station", "city": "Cambridge", "state": "MA",
     "latitude": 42.3956, "longitude": -71.1423, "pump_type": "river_management", "operator": "MDC"},

    # Philadelphia
    {"id": "phl-1", "code": "PHL-PENN", "name": "Pennypack Creek Pump Station", "city": "Philadelphia", "state": "PA",
     "latitude": 40.0734, "longitude": -75.0312, "pump_type": "river_management", "operator": "Philadelphia Water"},
    {"id": "phl-2", "code": "PHL-COBBS", "name": "Cobbs Creek Pump Station", "city": "Philadelphia", "state": "PA",
     "latitude": 39.9212, "longitude": -75.2345, "pump_type": "drainage_basin", "operator": "Philadelphia Water"},

    # San Francisco
    {"id": "sf-1", "code": "SF-OCEANSIDE", "name": "Oceanside Water Pollution Control Plant", "city": "San Francisco",
     "state": "CA", "latitude": 37.7234, "longitude": -122.4912, "pump_type": "stormwater", "operator": "SF PUC"},
    {"id": "sf-2", "code": "SF-MISSION", "name": "Mission Creek Pump Station", "city": "San Francisco", "state": "CA",
     "latitude": 37.7712, "longitude": -122.3945, "pump_type": "drainage_basin", "operator": "SF PUC"},

    # Seattle
    {"id": "sea-1", "code": "SEA-INTERBAY", "name": "Interbay Pump Station", "city": "Seattle", "state": "WA",
     "latitude": 47.6445, "longitude": -122.3867, "pump_type": "stormwater", "operator": "Seattle Public Utilities"},
    {"id": "sea-2", "code": "SEA-SOUTH", "name": "South Park Pump Station", "city": "Seattle", "state": "WA",
     "latitude": 47.5312, "longitude": -122.3156, "pump_type": "drainage_basin", "operator": "Seattle Public Utilities"},

    # Virginia Beach
    {"id": "vb-1", "code": "VB-OCEANFRONT", "name": "Oceanfront Pump Station", "city": "Virginia Beach", "state": "VA",
     "latitude": 36.8529, "longitude": -75.9780, "pump_type": "coastal_defense", "operator": "VB Public Utilities"},
    {"id": "vb-2", "code": "VB-LYNNHAVEN", "name": "Lynnhaven Inlet Pump Station", "city": "Virginia Beach",
     "state": "VA", "latitude": 36.9145, "longitude": -76.0456, "pump_type": "coastal_defense",
     "operator": "VB Public Utilities"},

    # Charleston
    {"id": "chs-1", "code": "CHS-PENN-01", "name": "Peninsula Drainage Pump 1", "city": "Charleston", "state": "SC",
     "latitude": 32.7765, "longitude": -79.9311, "pump_type": "drainage_basin", "operator": "Charleston Water System"},

    # Galveston
    {"id": "gal-1", "code": "GAL-SW-01", "name": "Galveston Seawall Pump 1", "city": "Galveston", "state": "TX",
     "latitude": 29.2983, "longitude": -94.7917, "pump_type": "coastal_defense", "operator": "City of Galveston"},
]
