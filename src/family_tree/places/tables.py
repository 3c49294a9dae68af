"""Static lookup tables for place normalization."""

from __future__ import annotations

# Lower-cased full names and common historical variants -> postal abbreviation
STATE_ABBREVIATIONS: dict[str, str] = {
    "alabama": "AL", "alaska": "AK", "arizona": "AZ", "arkansas": "AR",
    "california": "CA", "colorado": "CO", "connecticut": "CT", "delaware": "DE",
    "florida": "FL", "georgia": "GA", "hawaii": "HI", "idaho": "ID",
    "illinois": "IL", "indiana": "IN", "iowa": "IA", "kansas": "KS",
    "kentucky": "KY", "louisiana": "LA", "maine": "ME", "maryland": "MD",
    "massachusetts": "MA", "michigan": "MI", "minnesota": "MN", "mississippi": "MS",
    "missouri": "MO", "montana": "MT", "nebraska": "NE", "nevada": "NV",
    "new hampshire": "NH", "new jersey": "NJ", "new mexico": "NM", "new york": "NY",
    "north carolina": "NC", "north dakota": "ND", "ohio": "OH", "oklahoma": "OK",
    "oregon": "OR", "pennsylvania": "PA", "rhode island": "RI", "south carolina": "SC",
    "south dakota": "SD", "tennessee": "TN", "texas": "TX", "utah": "UT",
    "vermont": "VT", "virginia": "VA", "washington": "WA", "west virginia": "WV",
    "wisconsin": "WI", "wyoming": "WY", "district of columbia": "DC",

    # Historical and abbreviated forms
    "mass": "MA", "mass.": "MA", "massachusetts bay": "MA", "mass bay colony": "MA",
    "penn": "PA", "penn.": "PA", "penna": "PA", "penna.": "PA",
    "conn": "CT", "conn.": "CT",
    "va": "VA", "va.": "VA",
    "ny": "NY", "n.y.": "NY", "n.y": "NY",
    "indian territory": "OK",
    "dakota territory": "SD",  # could equally be ND
}

STATE_NAMES: dict[str, str] = {
    "AL": "Alabama", "AK": "Alaska", "AZ": "Arizona", "AR": "Arkansas",
    "CA": "California", "CO": "Colorado", "CT": "Connecticut", "DE": "Delaware",
    "FL": "Florida", "GA": "Georgia", "HI": "Hawaii", "ID": "Idaho",
    "IL": "Illinois", "IN": "Indiana", "IA": "Iowa", "KS": "Kansas",
    "KY": "Kentucky", "LA": "Louisiana", "ME": "Maine", "MD": "Maryland",
    "MA": "Massachusetts", "MI": "Michigan", "MN": "Minnesota", "MS": "Mississippi",
    "MO": "Missouri", "MT": "Montana", "NE": "Nebraska", "NV": "Nevada",
    "NH": "New Hampshire", "NJ": "New Jersey", "NM": "New Mexico", "NY": "New York",
    "NC": "North Carolina", "ND": "North Dakota", "OH": "Ohio", "OK": "Oklahoma",
    "OR": "Oregon", "PA": "Pennsylvania", "RI": "Rhode Island", "SC": "South Carolina",
    "SD": "South Dakota", "TN": "Tennessee", "TX": "Texas", "UT": "Utah",
    "VT": "Vermont", "VA": "Virginia", "WA": "Washington", "WV": "West Virginia",
    "WI": "Wisconsin", "WY": "Wyoming", "DC": "District of Columbia",
}

STATE_TO_REGION: dict[str, str] = {
    # New England
    "CT": "New England", "ME": "New England", "MA": "New England",
    "NH": "New England", "RI": "New England", "VT": "New England",

    # Mid-Atlantic
    "NJ": "Mid-Atlantic", "NY": "Mid-Atlantic", "PA": "Mid-Atlantic",
    "DE": "Mid-Atlantic", "MD": "Mid-Atlantic", "DC": "Mid-Atlantic",

    # Upper South
    "VA": "Upper South", "WV": "Upper South", "KY": "Upper South",
    "NC": "Upper South", "TN": "Upper South",

    # Deep South
    "SC": "Deep South", "GA": "Deep South", "FL": "Deep South",
    "AL": "Deep South", "MS": "Deep South", "LA": "Deep South",

    # Midwest
    "OH": "Midwest", "IN": "Midwest", "IL": "Midwest", "MI": "Midwest",
    "WI": "Midwest", "MN": "Midwest", "IA": "Midwest", "MO": "Midwest",
    "ND": "Midwest", "SD": "Midwest", "NE": "Midwest", "KS": "Midwest",

    # Southwest
    "TX": "Southwest", "OK": "Southwest", "AR": "Southwest",
    "AZ": "Southwest", "NM": "Southwest",

    # Mountain West
    "CO": "Mountain West", "WY": "Mountain West", "MT": "Mountain West",
    "ID": "Mountain West", "UT": "Mountain West", "NV": "Mountain West",

    # Pacific
    "CA": "Pacific", "OR": "Pacific", "WA": "Pacific",
    "AK": "Pacific", "HI": "Pacific",
}

UNITED_STATES = "United States"

COUNTRY_VARIANTS: dict[str, str] = {
    "usa": UNITED_STATES,
    "u.s.a.": UNITED_STATES,
    "u.s.": UNITED_STATES,
    "us": UNITED_STATES,
    "united states": UNITED_STATES,
    "united states of america": UNITED_STATES,
    "america": UNITED_STATES,

    "uk": "United Kingdom",
    "u.k.": "United Kingdom",
    "great britain": "United Kingdom",
    "britain": "United Kingdom",
    "england": "England",
    "scotland": "Scotland",
    "wales": "Wales",
    "ireland": "Ireland",
    "northern ireland": "Northern Ireland",

    "germany": "Germany",
    "deutschland": "Germany",
    "prussia": "Germany (Prussia)",
    "bavaria": "Germany (Bavaria)",
    "saxony": "Germany (Saxony)",
    "hesse": "Germany (Hesse)",
    "palatinate": "Germany (Palatinate)",

    "france": "France",
    "french": "France",

    "canada": "Canada",
    "quebec": "Canada (Quebec)",
    "ontario": "Canada (Ontario)",

    "mexico": "Mexico",
    "new spain": "Mexico (New Spain)",
}

COUNTY_MARKERS = ("county", "parish", "borough")
