"""
Country lookup used when canonicalizing the ``country`` identifier.

Keys are lowercase with all whitespace removed (``"unitedstates"``), plus ISO
3166-1 alpha-3 codes and a handful of everyday aliases. Values are lowercase
ISO 3166-1 alpha-2 codes. Alpha-2 codes map to themselves so a canonical value
survives a second lookup unchanged.
"""

from types import MappingProxyType

# (alpha-2, alpha-3, whitespace-free English short name)
_ISO_3166 = (
    ("af", "afg", "afghanistan"),
    ("ax", "ala", "alandislands"),
    ("al", "alb", "albania"),
    ("dz", "dza", "algeria"),
    ("as", "asm", "americansamoa"),
    ("ad", "and", "andorra"),
    ("ao", "ago", "angola"),
    ("ai", "aia", "anguilla"),
    ("aq", "ata", "antarctica"),
    ("ag", "atg", "antiguaandbarbuda"),
    ("ar", "arg", "argentina"),
    ("am", "arm", "armenia"),
    ("aw", "abw", "aruba"),
    ("au", "aus", "australia"),
    ("at", "aut", "austria"),
    ("az", "aze", "azerbaijan"),
    ("bs", "bhs", "bahamas"),
    ("bh", "bhr", "bahrain"),
    ("bd", "bgd", "bangladesh"),
    ("bb", "brb", "barbados"),
    ("by", "blr", "belarus"),
    ("be", "bel", "belgium"),
    ("bz", "blz", "belize"),
    ("bj", "ben", "benin"),
    ("bm", "bmu", "bermuda"),
    ("bt", "btn", "bhutan"),
    ("bo", "bol", "bolivia"),
    ("bq", "bes", "bonaire,sinteustatiusandsaba"),
    ("ba", "bih", "bosniaandherzegovina"),
    ("bw", "bwa", "botswana"),
    ("bv", "bvt", "bouvetisland"),
    ("br", "bra", "brazil"),
    ("io", "iot", "britishindianoceanterritory"),
    ("bn", "brn", "bruneidarussalam"),
    ("bg", "bgr", "bulgaria"),
    ("bf", "bfa", "burkinafaso"),
    ("bi", "bdi", "burundi"),
    ("cv", "cpv", "caboverde"),
    ("kh", "khm", "cambodia"),
    ("cm", "cmr", "cameroon"),
    ("ca", "can", "canada"),
    ("ky", "cym", "caymanislands"),
    ("cf", "caf", "centralafricanrepublic"),
    ("td", "tcd", "chad"),
    ("cl", "chl", "chile"),
    ("cn", "chn", "china"),
    ("cx", "cxr", "christmasisland"),
    ("cc", "cck", "cocos(keeling)islands"),
    ("co", "col", "colombia"),
    ("km", "com", "comoros"),
    ("cg", "cog", "congo"),
    ("cd", "cod", "democraticrepublicofthecongo"),
    ("ck", "cok", "cookislands"),
    ("cr", "cri", "costarica"),
    ("ci", "civ", "cotedivoire"),
    ("hr", "hrv", "croatia"),
    ("cu", "cub", "cuba"),
    ("cw", "cuw", "curacao"),
    ("cy", "cyp", "cyprus"),
    ("cz", "cze", "czechia"),
    ("dk", "dnk", "denmark"),
    ("dj", "dji", "djibouti"),
    ("dm", "dma", "dominica"),
    ("do", "dom", "dominicanrepublic"),
    ("ec", "ecu", "ecuador"),
    ("eg", "egy", "egypt"),
    ("sv", "slv", "elsalvador"),
    ("gq", "gnq", "equatorialguinea"),
    ("er", "eri", "eritrea"),
    ("ee", "est", "estonia"),
    ("sz", "swz", "eswatini"),
    ("et", "eth", "ethiopia"),
    ("fk", "flk", "falklandislands"),
    ("fo", "fro", "faroeislands"),
    ("fj", "fji", "fiji"),
    ("fi", "fin", "finland"),
    ("fr", "fra", "france"),
    ("gf", "guf", "frenchguiana"),
    ("pf", "pyf", "frenchpolynesia"),
    ("tf", "atf", "frenchsouthernterritories"),
    ("ga", "gab", "gabon"),
    ("gm", "gmb", "gambia"),
    ("ge", "geo", "georgia"),
    ("de", "deu", "germany"),
    ("gh", "gha", "ghana"),
    ("gi", "gib", "gibraltar"),
    ("gr", "grc", "greece"),
    ("gl", "grl", "greenland"),
    ("gd", "grd", "grenada"),
    ("gp", "glp", "guadeloupe"),
    ("gu", "gum", "guam"),
    ("gt", "gtm", "guatemala"),
    ("gg", "ggy", "guernsey"),
    ("gn", "gin", "guinea"),
    ("gw", "gnb", "guinea-bissau"),
    ("gy", "guy", "guyana"),
    ("ht", "hti", "haiti"),
    ("hm", "hmd", "heardislandandmcdonaldislands"),
    ("va", "vat", "holysee"),
    ("hn", "hnd", "honduras"),
    ("hk", "hkg", "hongkong"),
    ("hu", "hun", "hungary"),
    ("is", "isl", "iceland"),
    ("in", "ind", "india"),
    ("id", "idn", "indonesia"),
    ("ir", "irn", "iran"),
    ("iq", "irq", "iraq"),
    ("ie", "irl", "ireland"),
    ("im", "imn", "isleofman"),
    ("il", "isr", "israel"),
    ("it", "ita", "italy"),
    ("jm", "jam", "jamaica"),
    ("jp", "jpn", "japan"),
    ("je", "jey", "jersey"),
    ("jo", "jor", "jordan"),
    ("kz", "kaz", "kazakhstan"),
    ("ke", "ken", "kenya"),
    ("ki", "kir", "kiribati"),
    ("kp", "prk", "northkorea"),
    ("kr", "kor", "southkorea"),
    ("kw", "kwt", "kuwait"),
    ("kg", "kgz", "kyrgyzstan"),
    ("la", "lao", "laos"),
    ("lv", "lva", "latvia"),
    ("lb", "lbn", "lebanon"),
    ("ls", "lso", "lesotho"),
    ("lr", "lbr", "liberia"),
    ("ly", "lby", "libya"),
    ("li", "lie", "liechtenstein"),
    ("lt", "ltu", "lithuania"),
    ("lu", "lux", "luxembourg"),
    ("mo", "mac", "macao"),
    ("mg", "mdg", "madagascar"),
    ("mw", "mwi", "malawi"),
    ("my", "mys", "malaysia"),
    ("mv", "mdv", "maldives"),
    ("ml", "mli", "mali"),
    ("mt", "mlt", "malta"),
    ("mh", "mhl", "marshallislands"),
    ("mq", "mtq", "martinique"),
    ("mr", "mrt", "mauritania"),
    ("mu", "mus", "mauritius"),
    ("yt", "myt", "mayotte"),
    ("mx", "mex", "mexico"),
    ("fm", "fsm", "micronesia"),
    ("md", "mda", "moldova"),
    ("mc", "mco", "monaco"),
    ("mn", "mng", "mongolia"),
    ("me", "mne", "montenegro"),
    ("ms", "msr", "montserrat"),
    ("ma", "mar", "morocco"),
    ("mz", "moz", "mozambique"),
    ("mm", "mmr", "myanmar"),
    ("na", "nam", "namibia"),
    ("nr", "nru", "nauru"),
    ("np", "npl", "nepal"),
    ("nl", "nld", "netherlands"),
    ("nc", "ncl", "newcaledonia"),
    ("nz", "nzl", "newzealand"),
    ("ni", "nic", "nicaragua"),
    ("ne", "ner", "niger"),
    ("ng", "nga", "nigeria"),
    ("nu", "niu", "niue"),
    ("nf", "nfk", "norfolkisland"),
    ("mk", "mkd", "northmacedonia"),
    ("mp", "mnp", "northernmarianaislands"),
    ("no", "nor", "norway"),
    ("om", "omn", "oman"),
    ("pk", "pak", "pakistan"),
    ("pw", "plw", "palau"),
    ("ps", "pse", "palestine"),
    ("pa", "pan", "panama"),
    ("pg", "png", "papuanewguinea"),
    ("py", "pry", "paraguay"),
    ("pe", "per", "peru"),
    ("ph", "phl", "philippines"),
    ("pn", "pcn", "pitcairn"),
    ("pl", "pol", "poland"),
    ("pt", "prt", "portugal"),
    ("pr", "pri", "puertorico"),
    ("qa", "qat", "qatar"),
    ("re", "reu", "reunion"),
    ("ro", "rou", "romania"),
    ("ru", "rus", "russia"),
    ("rw", "rwa", "rwanda"),
    ("bl", "blm", "saintbarthelemy"),
    ("sh", "shn", "sainthelena"),
    ("kn", "kna", "saintkittsandnevis"),
    ("lc", "lca", "saintlucia"),
    ("mf", "maf", "saintmartin"),
    ("pm", "spm", "saintpierreandmiquelon"),
    ("vc", "vct", "saintvincentandthegrenadines"),
    ("ws", "wsm", "samoa"),
    ("sm", "smr", "sanmarino"),
    ("st", "stp", "saotomeandprincipe"),
    ("sa", "sau", "saudiarabia"),
    ("sn", "sen", "senegal"),
    ("rs", "srb", "serbia"),
    ("sc", "syc", "seychelles"),
    ("sl", "sle", "sierraleone"),
    ("sg", "sgp", "singapore"),
    ("sx", "sxm", "sintmaarten"),
    ("sk", "svk", "slovakia"),
    ("si", "svn", "slovenia"),
    ("sb", "slb", "solomonislands"),
    ("so", "som", "somalia"),
    ("za", "zaf", "southafrica"),
    ("gs", "sgs", "southgeorgiaandthesouthsandwichislands"),
    ("ss", "ssd", "southsudan"),
    ("es", "esp", "spain"),
    ("lk", "lka", "srilanka"),
    ("sd", "sdn", "sudan"),
    ("sr", "sur", "suriname"),
    ("sj", "sjm", "svalbardandjanmayen"),
    ("se", "swe", "sweden"),
    ("ch", "che", "switzerland"),
    ("sy", "syr", "syria"),
    ("tw", "twn", "taiwan"),
    ("tj", "tjk", "tajikistan"),
    ("tz", "tza", "tanzania"),
    ("th", "tha", "thailand"),
    ("tl", "tls", "timor-leste"),
    ("tg", "tgo", "togo"),
    ("tk", "tkl", "tokelau"),
    ("to", "ton", "tonga"),
    ("tt", "tto", "trinidadandtobago"),
    ("tn", "tun", "tunisia"),
    ("tr", "tur", "turkey"),
    ("tm", "tkm", "turkmenistan"),
    ("tc", "tca", "turksandcaicosislands"),
    ("tv", "tuv", "tuvalu"),
    ("ug", "uga", "uganda"),
    ("ua", "ukr", "ukraine"),
    ("ae", "are", "unitedarabemirates"),
    ("gb", "gbr", "unitedkingdom"),
    ("us", "usa", "unitedstates"),
    ("um", "umi", "unitedstatesminoroutlyingislands"),
    ("uy", "ury", "uruguay"),
    ("uz", "uzb", "uzbekistan"),
    ("vu", "vut", "vanuatu"),
    ("ve", "ven", "venezuela"),
    ("vn", "vnm", "vietnam"),
    ("vg", "vgb", "britishvirginislands"),
    ("vi", "vir", "usvirginislands"),
    ("wf", "wlf", "wallisandfutuna"),
    ("eh", "esh", "westernsahara"),
    ("ye", "yem", "yemen"),
    ("zm", "zmb", "zambia"),
    ("zw", "zwe", "zimbabwe"),
)

_ALIASES = {
    "unitedstatesofamerica": "us",
    "u.s.": "us",
    "u.s.a.": "us",
    "america": "us",
    "uk": "gb",
    "u.k.": "gb",
    "greatbritain": "gb",
    "britain": "gb",
    "england": "gb",
    "scotland": "gb",
    "wales": "gb",
    "northernireland": "gb",
    "unitedkingdomofgreatbritainandnorthernireland": "gb",
    "russianfederation": "ru",
    "republicofkorea": "kr",
    "korea": "kr",
    "democraticpeoplesrepublicofkorea": "kp",
    "czechrepublic": "cz",
    "holland": "nl",
    "thenetherlands": "nl",
    "vatican": "va",
    "vaticancity": "va",
    "ivorycoast": "ci",
    "côtedivoire": "ci",
    "capeverde": "cv",
    "swaziland": "sz",
    "macedonia": "mk",
    "burma": "mm",
    "easttimor": "tl",
    "drc": "cd",
    "drcongo": "cd",
    "republicofthecongo": "cg",
    "brunei": "bn",
    "uae": "ae",
    "türkiye": "tr",
    "turkiye": "tr",
    "bolivia(plurinationalstateof)": "bo",
    "iran(islamicrepublicof)": "ir",
    "venezuela(bolivarianrepublicof)": "ve",
    "tanzania,unitedrepublicof": "tz",
    "laopeoplesdemocraticrepublic": "la",
    "syrianarabrepublic": "sy",
    "republicofmoldova": "md",
    "hongkongsar": "hk",
    "macau": "mo",
}

COUNTRY_CODES = MappingProxyType(
    {
        **{alpha3: alpha2 for alpha2, alpha3, _ in _ISO_3166},
        **{name: alpha2 for alpha2, _, name in _ISO_3166},
        **_ALIASES,
        **{alpha2: alpha2 for alpha2, _, _ in _ISO_3166},
    }
)
