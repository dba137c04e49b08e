"""
Tax bracket data, keyed by tax year.

Canada (2025):
  - Federal: CRA individual rates, current year
  - Provincial / territorial: provincial tax acts via CRA references
  - Capital gains inclusion: 50% on the first $250k, 2/3 above (individuals)

United States (2025, single filer):
  - Federal: IRS Rev. Proc. 2024-40
  - Long-term capital gains: IRS Topic 409 (NIIT not included)
  - States: Tax Foundation 2025 state income tax rates

The US federal table stores the standard deduction ($15,000) as its basic
personal amount. tax.engine subtracts it from income; calculate_progressive_tax
credits it at the lowest rate like a Canadian BPA.

New years are added as new keys; published years are never edited in place.
"""

from __future__ import annotations

from math import inf
from typing import Dict

from .brackets import BracketTable, CapitalGainsSchedule, build_table


CURRENT_TAX_YEAR = 2025

CA_CAPITAL_GAINS = CapitalGainsSchedule(
    first_tier_limit=250_000,
    first_tier_rate=0.5,
    second_tier_rate=2 / 3,
)

# ─── Canada ───────────────────────────────────────────────────────────────────

CA_FEDERAL_2025 = build_table(
    "CA federal 2025",
    [(57_375, 0.15), (114_750, 0.205), (158_468, 0.26), (220_000, 0.29), (inf, 0.33)],
    basic_personal_amount=16_129,
)

CA_PROVINCIAL_2025: Dict[str, BracketTable] = {
    "AB": build_table(
        "Alberta 2025",
        [(148_269, 0.10), (177_922, 0.12), (237_230, 0.13), (355_845, 0.14), (inf, 0.15)],
        basic_personal_amount=21_003,
    ),
    "BC": build_table(
        "British Columbia 2025",
        [
            (47_937, 0.0506), (95_875, 0.077), (110_076, 0.105), (133_664, 0.1229),
            (181_232, 0.147), (252_752, 0.168), (inf, 0.205),
        ],
        basic_personal_amount=12_580,
    ),
    "MB": build_table(
        "Manitoba 2025",
        [(47_000, 0.108), (100_000, 0.1275), (inf, 0.174)],
        basic_personal_amount=15_780,
    ),
    "NB": build_table(
        "New Brunswick 2025",
        [(49_958, 0.094), (99_916, 0.14), (185_064, 0.16), (inf, 0.195)],
        basic_personal_amount=13_044,
    ),
    "NL": build_table(
        "Newfoundland and Labrador 2025",
        [
            (43_198, 0.087), (86_395, 0.145), (154_244, 0.158), (215_943, 0.178),
            (275_870, 0.198), (551_739, 0.208), (1_103_478, 0.213), (inf, 0.218),
        ],
        basic_personal_amount=10_818,
    ),
    "NT": build_table(
        "Northwest Territories 2025",
        [(50_597, 0.059), (101_198, 0.086), (164_525, 0.122), (inf, 0.1405)],
        basic_personal_amount=17_373,
    ),
    "NS": build_table(
        "Nova Scotia 2025",
        [(29_590, 0.0879), (59_180, 0.1495), (93_000, 0.1667), (150_000, 0.175), (inf, 0.21)],
        basic_personal_amount=8_481,
    ),
    "NU": build_table(
        "Nunavut 2025",
        [(53_268, 0.04), (106_537, 0.07), (173_205, 0.09), (inf, 0.115)],
        basic_personal_amount=18_767,
    ),
    "ON": build_table(
        "Ontario 2025",
        [(52_886, 0.0505), (105_775, 0.0915), (150_000, 0.1116), (220_000, 0.1216), (inf, 0.1316)],
        basic_personal_amount=11_865,
    ),
    "PE": build_table(
        "Prince Edward Island 2025",
        [(32_656, 0.098), (64_313, 0.138), (105_000, 0.167), (140_000, 0.175), (inf, 0.19)],
        basic_personal_amount=13_500,
    ),
    "QC": build_table(
        "Quebec 2025",
        [(53_255, 0.14), (106_495, 0.19), (129_590, 0.24), (inf, 0.2575)],
        basic_personal_amount=18_056,
    ),
    "SK": build_table(
        "Saskatchewan 2025",
        [(52_057, 0.105), (148_734, 0.125), (inf, 0.145)],
        basic_personal_amount=18_491,
    ),
    "YT": build_table(
        "Yukon 2025",
        [(57_375, 0.064), (114_750, 0.09), (158_468, 0.109), (500_000, 0.128), (inf, 0.15)],
        basic_personal_amount=16_129,
    ),
}

# ─── United States ────────────────────────────────────────────────────────────

US_FEDERAL_2025 = build_table(
    "US federal 2025 (single)",
    [
        (11_925, 0.10), (48_475, 0.12), (103_350, 0.22), (197_300, 0.24),
        (250_525, 0.32), (626_350, 0.35), (inf, 0.37),
    ],
    basic_personal_amount=15_000,
)

US_CAPITAL_GAINS_2025 = build_table(
    "US long-term capital gains 2025 (single)",
    [(48_350, 0.0), (533_400, 0.15), (inf, 0.20)],
)

_NO_TAX = BracketTable(name="no state income tax")

US_NO_INCOME_TAX_STATES = frozenset({"AK", "FL", "NV", "NH", "SD", "TN", "TX", "WA", "WY"})


def _flat(state: str, rate: float) -> BracketTable:
    return build_table(f"{state} 2025 (flat)", [(inf, rate)])


US_STATE_2025: Dict[str, BracketTable] = {
    "AL": build_table("AL 2025", [(500, 0.02), (3_000, 0.04), (inf, 0.05)]),
    "AK": _NO_TAX,
    "AZ": _flat("AZ", 0.025),
    "AR": build_table("AR 2025", [(4_500, 0.02), (inf, 0.039)]),
    "CA": build_table(
        "CA 2025",
        [
            (10_756, 0.01), (25_499, 0.02), (40_245, 0.04), (55_866, 0.06), (70_606, 0.08),
            (360_659, 0.093), (432_787, 0.103), (721_314, 0.113), (1_000_000, 0.123), (inf, 0.133),
        ],
    ),
    "CO": _flat("CO", 0.044),
    "CT": build_table(
        "CT 2025",
        [
            (10_000, 0.02), (50_000, 0.045), (100_000, 0.055), (200_000, 0.06),
            (250_000, 0.065), (500_000, 0.069), (inf, 0.0699),
        ],
    ),
    "DE": build_table(
        "DE 2025",
        [
            (2_000, 0.0), (5_000, 0.022), (10_000, 0.039), (20_000, 0.048),
            (25_000, 0.052), (60_000, 0.0555), (inf, 0.066),
        ],
    ),
    "FL": _NO_TAX,
    "GA": _flat("GA", 0.0539),
    "HI": build_table(
        "HI 2025",
        [
            (9_600, 0.014), (14_400, 0.032), (19_200, 0.055), (24_000, 0.064),
            (36_000, 0.068), (48_000, 0.072), (125_000, 0.076), (175_000, 0.079),
            (225_000, 0.0825), (275_000, 0.09), (325_000, 0.10), (inf, 0.11),
        ],
    ),
    "ID": _flat("ID", 0.05695),
    "IL": _flat("IL", 0.0495),
    "IN": _flat("IN", 0.03),
    "IA": _flat("IA", 0.038),
    "KS": build_table("KS 2025", [(23_000, 0.052), (inf, 0.0558)]),
    "KY": _flat("KY", 0.04),
    "LA": _flat("LA", 0.03),
    "ME": build_table("ME 2025", [(26_800, 0.058), (63_450, 0.0675), (inf, 0.0715)]),
    "MD": build_table(
        "MD 2025",
        [
            (1_000, 0.02), (2_000, 0.03), (3_000, 0.04), (100_000, 0.0475),
            (125_000, 0.05), (150_000, 0.0525), (250_000, 0.055), (inf, 0.0575),
        ],
    ),
    "MA": build_table("MA 2025", [(1_083_150, 0.05), (inf, 0.09)]),
    "MI": _flat("MI", 0.0425),
    "MN": build_table("MN 2025", [(32_570, 0.0535), (106_990, 0.068), (198_630, 0.0785), (inf, 0.0985)]),
    "MS": _flat("MS", 0.044),
    "MO": build_table(
        "MO 2025",
        [
            (1_313, 0.0), (2_626, 0.02), (3_939, 0.025), (5_252, 0.03),
            (6_565, 0.035), (7_878, 0.04), (9_191, 0.045), (inf, 0.047),
        ],
    ),
    "MT": build_table("MT 2025", [(21_100, 0.047), (inf, 0.059)]),
    "NE": build_table("NE 2025", [(4_030, 0.0246), (24_120, 0.0351), (38_870, 0.0501), (inf, 0.052)]),
    "NV": _NO_TAX,
    "NH": _NO_TAX,
    "NJ": build_table(
        "NJ 2025",
        [
            (20_000, 0.014), (35_000, 0.0175), (40_000, 0.035), (75_000, 0.05525),
            (500_000, 0.0637), (1_000_000, 0.0897), (inf, 0.1075),
        ],
    ),
    "NM": build_table(
        "NM 2025",
        [(5_500, 0.015), (16_500, 0.032), (33_500, 0.043), (66_500, 0.047), (210_000, 0.049), (inf, 0.059)],
    ),
    "NY": build_table(
        "NY 2025",
        [
            (8_500, 0.04), (11_700, 0.045), (13_900, 0.0525), (80_650, 0.055), (215_400, 0.06),
            (1_077_550, 0.0685), (5_000_000, 0.0965), (25_000_000, 0.103), (inf, 0.109),
        ],
    ),
    "NC": _flat("NC", 0.0425),
    "ND": build_table("ND 2025", [(48_475, 0.0), (244_825, 0.0195), (inf, 0.025)]),
    "OH": build_table("OH 2025", [(26_050, 0.0), (100_000, 0.0275), (inf, 0.035)]),
    "OK": build_table(
        "OK 2025",
        [(1_000, 0.0025), (2_500, 0.0075), (3_750, 0.0175), (4_900, 0.0275), (7_200, 0.0375), (inf, 0.0475)],
    ),
    "OR": build_table("OR 2025", [(4_400, 0.0475), (11_050, 0.0675), (125_000, 0.0875), (inf, 0.099)]),
    "PA": _flat("PA", 0.0307),
    "RI": build_table("RI 2025", [(79_900, 0.0375), (181_650, 0.0475), (inf, 0.0599)]),
    "SC": build_table("SC 2025", [(3_560, 0.0), (17_830, 0.03), (inf, 0.062)]),
    "SD": _NO_TAX,
    "TN": _NO_TAX,
    "TX": _NO_TAX,
    "UT": _flat("UT", 0.0455),
    "VT": build_table("VT 2025", [(47_900, 0.0335), (116_000, 0.066), (242_000, 0.076), (inf, 0.0875)]),
    "VA": build_table("VA 2025", [(3_000, 0.02), (5_000, 0.03), (17_000, 0.05), (inf, 0.0575)]),
    "WA": _NO_TAX,
    "WV": build_table(
        "WV 2025",
        [(10_000, 0.0222), (25_000, 0.0296), (40_000, 0.0333), (60_000, 0.0444), (inf, 0.0482)],
    ),
    "WI": build_table("WI 2025", [(14_680, 0.035), (29_370, 0.044), (323_290, 0.053), (inf, 0.0765)]),
    "WY": _NO_TAX,
    "DC": build_table(
        "DC 2025",
        [
            (10_000, 0.04), (40_000, 0.06), (60_000, 0.065), (250_000, 0.085),
            (500_000, 0.0925), (1_000_000, 0.0975), (inf, 0.1075),
        ],
    ),
}

# ─── Year-keyed registries ────────────────────────────────────────────────────

CA_FEDERAL: Dict[int, BracketTable] = {2025: CA_FEDERAL_2025}
CA_PROVINCIAL: Dict[int, Dict[str, BracketTable]] = {2025: CA_PROVINCIAL_2025}
US_FEDERAL: Dict[int, BracketTable] = {2025: US_FEDERAL_2025}
US_CAPITAL_GAINS: Dict[int, BracketTable] = {2025: US_CAPITAL_GAINS_2025}
US_STATE: Dict[int, Dict[str, BracketTable]] = {2025: US_STATE_2025}
