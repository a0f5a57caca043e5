from __future__ import annotations

from claim_match.models import RosterEntry

# Known insureds; order matters, the first entry wins a tied score.
INSUREDS: tuple[RosterEntry, ...] = (
    RosterEntry("A1B2", "Riley HealthCare LLC"),
    RosterEntry("C3D4", "Quail Creek RE LLC"),
    RosterEntry("E5F6", "William James Group LLC"),
    RosterEntry("G7H8", "Northstar Logistics Inc."),
    RosterEntry("I9J0", "Evergreen Farms Ltd."),
    RosterEntry("K1L2", "Beacon Financial Services Corp"),
    RosterEntry("M3N4", "Hudson Valley Medical Partners"),
    RosterEntry("O5P6", "Sierra Manufacturing Co."),
    RosterEntry("Q7R8", "Lakeside Property Holdings, LLC"),
    RosterEntry("S9T0", "Atlas Retail Group, Inc."),
    RosterEntry("U1V2", "Pioneer Energy Solutions"),
    RosterEntry("W3X4", "Blue Ridge Hospitality Partners"),
    RosterEntry("Y5Z6", "Copper Mountain Mining Corp."),
    RosterEntry("B7C8", "Silverline Software Ltd."),
    RosterEntry("D9E0", "Harbor Point Marine Services"),
    RosterEntry("F1G2", "Metro Transit Authority"),
    RosterEntry("H3I4", "Golden Gate Ventures LLC"),
    RosterEntry("J5K6", "Cypress Pharmaceuticals, Inc."),
    RosterEntry("L7M8", "Redwood Timber Holdings"),
    RosterEntry("N9O0", "Summit Peak Outdoor Gear"),
    RosterEntry("P1Q2", "Capital Square Investments"),
    RosterEntry("R3S4", "Ironclad Security Solutions"),
    RosterEntry("T5U6", "Frontier Airlines Group"),
    RosterEntry("V7W8", "Majestic Resorts & Spas Ltd."),
    RosterEntry("X9Y0", "Orchard Valley Foods"),
    RosterEntry("Z1A2", "Starlight Entertainment Corp"),
    RosterEntry("B3D4", "Cascade Water Works"),
    RosterEntry("F5H6", "Urban Grid Construction"),
    RosterEntry("J7L8", "Vertex Capital Management"),
)
