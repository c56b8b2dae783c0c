"""
US state and territory lookup used when canonicalizing the ``state`` identifier.

Keys are lowercase with all whitespace removed, since lookups happen after the
normalizer strips whitespace. Values are lowercase USPS postal codes.
"""

from types import MappingProxyType

_STATE_NAMES = {
    "alabama": "al",
    "alaska": "ak",
    "arizona": "az",
    "arkansas": "ar",
    "california": "ca",
    "colorado": "co",
    "connecticut": "ct",
    "delaware": "de",
    "districtofcolumbia": "dc",
    "washingtondc": "dc",
    "florida": "fl",
    "georgia": "ga",
    "hawaii": "hi",
    "idaho": "id",
    "illinois": "il",
    "indiana": "in",
    "iowa": "ia",
    "kansas": "ks",
    "kentucky": "ky",
    "louisiana": "la",
    "maine": "me",
    "maryland": "md",
    "massachusetts": "ma",
    "michigan": "mi",
    "minnesota": "mn",
    "mississippi": "ms",
    "missouri": "mo",
    "montana": "mt",
    "nebraska": "ne",
    "nevada": "nv",
    "newhampshire": "nh",
    "newjersey": "nj",
    "newmexico": "nm",
    "newyork": "ny",
    "northcarolina": "nc",
    "northdakota": "nd",
    "ohio": "oh",
    "oklahoma": "ok",
    "oregon": "or",
    "pennsylvania": "pa",
    "rhodeisland": "ri",
    "southcarolina": "sc",
    "southdakota": "sd",
    "tennessee": "tn",
    "texas": "tx",
    "utah": "ut",
    "vermont": "vt",
    "virginia": "va",
    "washington": "wa",
    "westvirginia": "wv",
    "wisconsin": "wi",
    "wyoming": "wy",
    # Territories
    "americansamoa": "as",
    "guam": "gu",
    "northernmarianaislands": "mp",
    "puertorico": "pr",
    "unitedstatesvirginislands": "vi",
    "usvirginislands": "vi",
    "virginislands": "vi",
}

# Traditional (AP / GPO) abbreviations still common in form input.
_STATE_ABBREVIATIONS = {
    "ala.": "al",
    "ala": "al",
    "ariz.": "az",
    "ariz": "az",
    "ark.": "ar",
    "calif.": "ca",
    "calif": "ca",
    "cal.": "ca",
    "colo.": "co",
    "colo": "co",
    "conn.": "ct",
    "conn": "ct",
    "del.": "de",
    "d.c.": "dc",
    "fla.": "fl",
    "fla": "fl",
    "ga.": "ga",
    "ill.": "il",
    "ill": "il",
    "ind.": "in",
    "ind": "in",
    "kan.": "ks",
    "kans": "ks",
    "ky.": "ky",
    "la.": "la",
    "md.": "md",
    "mass.": "ma",
    "mass": "ma",
    "mich.": "mi",
    "mich": "mi",
    "minn.": "mn",
    "minn": "mn",
    "miss.": "ms",
    "mo.": "mo",
    "mont.": "mt",
    "mont": "mt",
    "neb.": "ne",
    "nebr": "ne",
    "nev.": "nv",
    "n.h.": "nh",
    "n.j.": "nj",
    "n.m.": "nm",
    "n.y.": "ny",
    "n.c.": "nc",
    "n.d.": "nd",
    "okla.": "ok",
    "okla": "ok",
    "ore.": "or",
    "oreg": "or",
    "pa.": "pa",
    "penn": "pa",
    "penna": "pa",
    "r.i.": "ri",
    "s.c.": "sc",
    "s.d.": "sd",
    "tenn.": "tn",
    "tenn": "tn",
    "tex.": "tx",
    "tex": "tx",
    "vt.": "vt",
    "va.": "va",
    "wash.": "wa",
    "wash": "wa",
    "w.va.": "wv",
    "wis.": "wi",
    "wis": "wi",
    "wisc": "wi",
    "wyo.": "wy",
    "wyo": "wy",
}

_POSTAL_CODES = {code: code for code in set(_STATE_NAMES.values())}

US_STATE_CODES = MappingProxyType({**_POSTAL_CODES, **_STATE_ABBREVIATIONS, **_STATE_NAMES})
