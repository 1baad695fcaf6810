"""ISO 4217 currency table.

Active currencies and funds from ISO 4217 List One (2024 publication), with
the ISO 3166-1 alpha-2 codes of the entities listed for each currency.
Entries whose minor unit is "N.A." in the standard (precious metals, bond
market units, SDR, the testing code XTS and the no-currency code XXX) are
not included, since they have no default fraction digits.

Countries listed under more than one currency (for example CH with CHF, CHE
and CHW, or US with USD and USN) are ambiguous and resolve only by code.

Python 3.13+. Zero external dependencies.
"""

from currencykit.dataset import CurrencyEntry

__all__ = ["ISO_4217_ENTRIES"]

# fmt: off
ISO_4217_ENTRIES: tuple[CurrencyEntry, ...] = (
    CurrencyEntry("AED", 784, "UAE Dirham", 2, ("AE",)),
    CurrencyEntry("AFN", 971, "Afghani", 2, ("AF",)),
    CurrencyEntry("ALL", 8, "Lek", 2, ("AL",)),
    CurrencyEntry("AMD", 51, "Armenian Dram", 2, ("AM",)),
    CurrencyEntry("ANG", 532, "Netherlands Antillean Guilder", 2, ("CW", "SX")),
    CurrencyEntry("AOA", 973, "Kwanza", 2, ("AO",)),
    CurrencyEntry("ARS", 32, "Argentine Peso", 2, ("AR",)),
    CurrencyEntry("AUD", 36, "Australian Dollar", 2, (
        "AU", "CX", "CC", "HM", "KI", "NR", "NF", "TV",
    )),
    CurrencyEntry("AWG", 533, "Aruban Florin", 2, ("AW",)),
    CurrencyEntry("AZN", 944, "Azerbaijan Manat", 2, ("AZ",)),
    CurrencyEntry("BAM", 977, "Convertible Mark", 2, ("BA",)),
    CurrencyEntry("BBD", 52, "Barbados Dollar", 2, ("BB",)),
    CurrencyEntry("BDT", 50, "Taka", 2, ("BD",)),
    CurrencyEntry("BGN", 975, "Bulgarian Lev", 2, ("BG",)),
    CurrencyEntry("BHD", 48, "Bahraini Dinar", 3, ("BH",)),
    CurrencyEntry("BIF", 108, "Burundi Franc", 0, ("BI",)),
    CurrencyEntry("BMD", 60, "Bermudian Dollar", 2, ("BM",)),
    CurrencyEntry("BND", 96, "Brunei Dollar", 2, ("BN",)),
    CurrencyEntry("BOB", 68, "Boliviano", 2, ("BO",)),
    CurrencyEntry("BOV", 984, "Mvdol", 2, ("BO",)),
    CurrencyEntry("BRL", 986, "Brazilian Real", 2, ("BR",)),
    CurrencyEntry("BSD", 44, "Bahamian Dollar", 2, ("BS",)),
    CurrencyEntry("BTN", 64, "Ngultrum", 2, ("BT",)),
    CurrencyEntry("BWP", 72, "Pula", 2, ("BW",)),
    CurrencyEntry("BYN", 933, "Belarusian Ruble", 2, ("BY",)),
    CurrencyEntry("BZD", 84, "Belize Dollar", 2, ("BZ",)),
    CurrencyEntry("CAD", 124, "Canadian Dollar", 2, ("CA",)),
    CurrencyEntry("CDF", 976, "Congolese Franc", 2, ("CD",)),
    CurrencyEntry("CHE", 947, "WIR Euro", 2, ("CH",)),
    CurrencyEntry("CHF", 756, "Swiss Franc", 2, ("CH", "LI")),
    CurrencyEntry("CHW", 948, "WIR Franc", 2, ("CH",)),
    CurrencyEntry("CLF", 990, "Unidad de Fomento", 4, ("CL",)),
    CurrencyEntry("CLP", 152, "Chilean Peso", 0, ("CL",)),
    CurrencyEntry("CNY", 156, "Yuan Renminbi", 2, ("CN",)),
    CurrencyEntry("COP", 170, "Colombian Peso", 2, ("CO",)),
    CurrencyEntry("COU", 970, "Unidad de Valor Real", 2, ("CO",)),
    CurrencyEntry("CRC", 188, "Costa Rican Colon", 2, ("CR",)),
    CurrencyEntry("CUP", 192, "Cuban Peso", 2, ("CU",)),
    CurrencyEntry("CVE", 132, "Cabo Verde Escudo", 2, ("CV",)),
    CurrencyEntry("CZK", 203, "Czech Koruna", 2, ("CZ",)),
    CurrencyEntry("DJF", 262, "Djibouti Franc", 0, ("DJ",)),
    CurrencyEntry("DKK", 208, "Danish Krone", 2, ("DK", "FO", "GL")),
    CurrencyEntry("DOP", 214, "Dominican Peso", 2, ("DO",)),
    CurrencyEntry("DZD", 12, "Algerian Dinar", 2, ("DZ",)),
    CurrencyEntry("EGP", 818, "Egyptian Pound", 2, ("EG",)),
    CurrencyEntry("ERN", 232, "Nakfa", 2, ("ER",)),
    CurrencyEntry("ETB", 230, "Ethiopian Birr", 2, ("ET",)),
    CurrencyEntry("EUR", 978, "Euro", 2, (
        "AX", "AD", "AT", "BE", "HR", "CY", "EE", "FI", "FR", "GF", "TF",
        "DE", "GR", "GP", "VA", "IE", "IT", "LV", "LT", "LU", "MT", "MQ",
        "YT", "MC", "ME", "NL", "PT", "RE", "BL", "MF", "PM", "SM", "SK",
        "SI", "ES",
    )),
    CurrencyEntry("FJD", 242, "Fiji Dollar", 2, ("FJ",)),
    CurrencyEntry("FKP", 238, "Falkland Islands Pound", 2, ("FK",)),
    CurrencyEntry("GBP", 826, "Pound Sterling", 2, ("GB", "GG", "IM", "JE")),
    CurrencyEntry("GEL", 981, "Lari", 2, ("GE",)),
    CurrencyEntry("GHS", 936, "Ghana Cedi", 2, ("GH",)),
    CurrencyEntry("GIP", 292, "Gibraltar Pound", 2, ("GI",)),
    CurrencyEntry("GMD", 270, "Dalasi", 2, ("GM",)),
    CurrencyEntry("GNF", 324, "Guinean Franc", 0, ("GN",)),
    CurrencyEntry("GTQ", 320, "Quetzal", 2, ("GT",)),
    CurrencyEntry("GYD", 328, "Guyana Dollar", 2, ("GY",)),
    CurrencyEntry("HKD", 344, "Hong Kong Dollar", 2, ("HK",)),
    CurrencyEntry("HNL", 340, "Lempira", 2, ("HN",)),
    CurrencyEntry("HTG", 332, "Gourde", 2, ("HT",)),
    CurrencyEntry("HUF", 348, "Forint", 2, ("HU",)),
    CurrencyEntry("IDR", 360, "Rupiah", 2, ("ID",)),
    CurrencyEntry("ILS", 376, "New Israeli Sheqel", 2, ("IL",)),
    CurrencyEntry("INR", 356, "Indian Rupee", 2, ("BT", "IN")),
    CurrencyEntry("IQD", 368, "Iraqi Dinar", 3, ("IQ",)),
    CurrencyEntry("IRR", 364, "Iranian Rial", 2, ("IR",)),
    CurrencyEntry("ISK", 352, "Iceland Krona", 0, ("IS",)),
    CurrencyEntry("JMD", 388, "Jamaican Dollar", 2, ("JM",)),
    CurrencyEntry("JOD", 400, "Jordanian Dinar", 3, ("JO",)),
    CurrencyEntry("JPY", 392, "Yen", 0, ("JP",)),
    CurrencyEntry("KES", 404, "Kenyan Shilling", 2, ("KE",)),
    CurrencyEntry("KGS", 417, "Som", 2, ("KG",)),
    CurrencyEntry("KHR", 116, "Riel", 2, ("KH",)),
    CurrencyEntry("KMF", 174, "Comorian Franc", 0, ("KM",)),
    CurrencyEntry("KPW", 408, "North Korean Won", 2, ("KP",)),
    CurrencyEntry("KRW", 410, "Won", 0, ("KR",)),
    CurrencyEntry("KWD", 414, "Kuwaiti Dinar", 3, ("KW",)),
    CurrencyEntry("KYD", 136, "Cayman Islands Dollar", 2, ("KY",)),
    CurrencyEntry("KZT", 398, "Tenge", 2, ("KZ",)),
    CurrencyEntry("LAK", 418, "Lao Kip", 2, ("LA",)),
    CurrencyEntry("LBP", 422, "Lebanese Pound", 2, ("LB",)),
    CurrencyEntry("LKR", 144, "Sri Lanka Rupee", 2, ("LK",)),
    CurrencyEntry("LRD", 430, "Liberian Dollar", 2, ("LR",)),
    CurrencyEntry("LSL", 426, "Loti", 2, ("LS",)),
    CurrencyEntry("LYD", 434, "Libyan Dinar", 3, ("LY",)),
    CurrencyEntry("MAD", 504, "Moroccan Dirham", 2, ("MA", "EH")),
    CurrencyEntry("MDL", 498, "Moldovan Leu", 2, ("MD",)),
    CurrencyEntry("MGA", 969, "Malagasy Ariary", 2, ("MG",)),
    CurrencyEntry("MKD", 807, "Denar", 2, ("MK",)),
    CurrencyEntry("MMK", 104, "Kyat", 2, ("MM",)),
    CurrencyEntry("MNT", 496, "Tugrik", 2, ("MN",)),
    CurrencyEntry("MOP", 446, "Pataca", 2, ("MO",)),
    CurrencyEntry("MRU", 929, "Ouguiya", 2, ("MR",)),
    CurrencyEntry("MUR", 480, "Mauritius Rupee", 2, ("MU",)),
    CurrencyEntry("MVR", 462, "Rufiyaa", 2, ("MV",)),
    CurrencyEntry("MWK", 454, "Malawi Kwacha", 2, ("MW",)),
    CurrencyEntry("MXN", 484, "Mexican Peso", 2, ("MX",)),
    CurrencyEntry("MXV", 979, "Mexican Unidad de Inversion (UDI)", 2, ("MX",)),
    CurrencyEntry("MYR", 458, "Malaysian Ringgit", 2, ("MY",)),
    CurrencyEntry("MZN", 943, "Mozambique Metical", 2, ("MZ",)),
    CurrencyEntry("NAD", 516, "Namibia Dollar", 2, ("NA",)),
    CurrencyEntry("NGN", 566, "Naira", 2, ("NG",)),
    CurrencyEntry("NIO", 558, "Cordoba Oro", 2, ("NI",)),
    CurrencyEntry("NOK", 578, "Norwegian Krone", 2, ("BV", "NO", "SJ")),
    CurrencyEntry("NPR", 524, "Nepalese Rupee", 2, ("NP",)),
    CurrencyEntry("NZD", 554, "New Zealand Dollar", 2, ("CK", "NZ", "NU", "PN", "TK")),
    CurrencyEntry("OMR", 512, "Rial Omani", 3, ("OM",)),
    CurrencyEntry("PAB", 590, "Balboa", 2, ("PA",)),
    CurrencyEntry("PEN", 604, "Sol", 2, ("PE",)),
    CurrencyEntry("PGK", 598, "Kina", 2, ("PG",)),
    CurrencyEntry("PHP", 608, "Philippine Peso", 2, ("PH",)),
    CurrencyEntry("PKR", 586, "Pakistan Rupee", 2, ("PK",)),
    CurrencyEntry("PLN", 985, "Zloty", 2, ("PL",)),
    CurrencyEntry("PYG", 600, "Guarani", 0, ("PY",)),
    CurrencyEntry("QAR", 634, "Qatari Rial", 2, ("QA",)),
    CurrencyEntry("RON", 946, "Romanian Leu", 2, ("RO",)),
    CurrencyEntry("RSD", 941, "Serbian Dinar", 2, ("RS",)),
    CurrencyEntry("RUB", 643, "Russian Ruble", 2, ("RU",)),
    CurrencyEntry("RWF", 646, "Rwanda Franc", 0, ("RW",)),
    CurrencyEntry("SAR", 682, "Saudi Riyal", 2, ("SA",)),
    CurrencyEntry("SBD", 90, "Solomon Islands Dollar", 2, ("SB",)),
    CurrencyEntry("SCR", 690, "Seychelles Rupee", 2, ("SC",)),
    CurrencyEntry("SDG", 938, "Sudanese Pound", 2, ("SD",)),
    CurrencyEntry("SEK", 752, "Swedish Krona", 2, ("SE",)),
    CurrencyEntry("SGD", 702, "Singapore Dollar", 2, ("SG",)),
    CurrencyEntry("SHP", 654, "Saint Helena Pound", 2, ("SH",)),
    CurrencyEntry("SLE", 925, "Leone", 2, ("SL",)),
    CurrencyEntry("SOS", 706, "Somali Shilling", 2, ("SO",)),
    CurrencyEntry("SRD", 968, "Surinam Dollar", 2, ("SR",)),
    CurrencyEntry("SSP", 728, "South Sudanese Pound", 2, ("SS",)),
    CurrencyEntry("STN", 930, "Dobra", 2, ("ST",)),
    CurrencyEntry("SVC", 222, "El Salvador Colon", 2, ("SV",)),
    CurrencyEntry("SYP", 760, "Syrian Pound", 2, ("SY",)),
    CurrencyEntry("SZL", 748, "Lilangeni", 2, ("SZ",)),
    CurrencyEntry("THB", 764, "Baht", 2, ("TH",)),
    CurrencyEntry("TJS", 972, "Somoni", 2, ("TJ",)),
    CurrencyEntry("TMT", 934, "Turkmenistan New Manat", 2, ("TM",)),
    CurrencyEntry("TND", 788, "Tunisian Dinar", 3, ("TN",)),
    CurrencyEntry("TOP", 776, "Pa'anga", 2, ("TO",)),
    CurrencyEntry("TRY", 949, "Turkish Lira", 2, ("TR",)),
    CurrencyEntry("TTD", 780, "Trinidad and Tobago Dollar", 2, ("TT",)),
    CurrencyEntry("TWD", 901, "New Taiwan Dollar", 2, ("TW",)),
    CurrencyEntry("TZS", 834, "Tanzanian Shilling", 2, ("TZ",)),
    CurrencyEntry("UAH", 980, "Hryvnia", 2, ("UA",)),
    CurrencyEntry("UGX", 800, "Uganda Shilling", 0, ("UG",)),
    CurrencyEntry("USD", 840, "US Dollar", 2, (
        "AS", "BQ", "IO", "EC", "SV", "GU", "HT", "MH", "FM", "MP", "PW",
        "PA", "PR", "TL", "TC", "UM", "US", "VG", "VI",
    )),
    CurrencyEntry("USN", 997, "US Dollar (Next day)", 2, ("US",)),
    CurrencyEntry("UYI", 940, "Uruguay Peso en Unidades Indexadas (UI)", 0, ("UY",)),
    CurrencyEntry("UYU", 858, "Peso Uruguayo", 2, ("UY",)),
    CurrencyEntry("UYW", 927, "Unidad Previsional", 4, ("UY",)),
    CurrencyEntry("UZS", 860, "Uzbekistan Sum", 2, ("UZ",)),
    CurrencyEntry("VED", 926, "Bolívar Soberano", 2, ("VE",)),
    CurrencyEntry("VES", 928, "Bolívar Soberano", 2, ("VE",)),
    CurrencyEntry("VND", 704, "Dong", 0, ("VN",)),
    CurrencyEntry("VUV", 548, "Vatu", 0, ("VU",)),
    CurrencyEntry("WST", 882, "Tala", 2, ("WS",)),
    CurrencyEntry("XAF", 950, "CFA Franc BEAC", 0, ("CM", "CF", "TD", "CG", "GQ", "GA")),
    CurrencyEntry("XCD", 951, "East Caribbean Dollar", 2, (
        "AI", "AG", "DM", "GD", "MS", "KN", "LC", "VC",
    )),
    CurrencyEntry("XOF", 952, "CFA Franc BCEAO", 0, (
        "BJ", "BF", "CI", "GW", "ML", "NE", "SN", "TG",
    )),
    CurrencyEntry("XPF", 953, "CFP Franc", 0, ("PF", "NC", "WF")),
    CurrencyEntry("YER", 886, "Yemeni Rial", 2, ("YE",)),
    CurrencyEntry("ZAR", 710, "Rand", 2, ("LS", "NA", "ZA")),
    CurrencyEntry("ZMW", 967, "Zambian Kwacha", 2, ("ZM",)),
    CurrencyEntry("ZWG", 924, "Zimbabwe Gold", 2, ("ZW",)),
)
# fmt: on
