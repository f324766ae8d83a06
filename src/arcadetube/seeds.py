from __future__ import annotations

SEED_VIDEO_IDS: tuple[str, ...] = (
    "tsKd6HdXvso", "RjGv7Sa4YQo", "4z31xQuGTp4", "3qqJ1WpF1Cg", "uISk1HrbFzA", "q5d60AsaN98",
    "Wy_pD0JgHR4", "2BN2jH1zlUA", "bBYYGWyi_Ig", "aKPhl4S91mM", "ZCEXyMPKWhA", "7fJuYvx3ou0",
    "2t0vIcfvEeY", "uPVjCDbc-Ow", "uRcy4Aj4B8w", "BZqKDdCoTZM", "HcHpQ_qj6WQ", "en95U1lK2EQ",
    "LQa1mIGbV1c", "72xB_012eVY", "3gVFHFm9Gxw", "xiXCHkBaOCg", "ZbgdnKbyFSo", "BoE8mVhNjO0",
    "6beo8GHes4U", "4H4ID0eHREE", "jmKak1vq1Go", "Ogu6EGNumKI", "N1W9IzcJ8Ug", "pYT8w_qP6ro",
    "gVw3xo5Uf-8", "KLLJJIs9_7s", "KATAtxUEEy4", "RVZCWJ8XuhI", "sRfanR9ZZ0U", "iXr5sT3PFKg",
    "NmZm5YQf8l0", "GlgVZ5Z76-M", "1wMEC1WZLts", "qs4FOgqvTj0", "lHrI8DmPCac", "ULY7WX4_Sd8",
    "MpffoNUUGx8", "KkPGFKp0gXA", "pJEKdGGQXdo", "_yyszvUE4r8", "FPSmZacW_UA", "hwuuwNyRcKI",
    "-Xh9NYCRw0M", "9w_utuMvfOc", "SvFOQobTzk0", "xhBY87NDwrE", "6IEVhN5zJC0", "VxQ4wn8cGyA",
    "op0UXD2l55g", "oj9dwIkLI_4", "oTME3Ur1-ak", "w2DOYY1mFrg", "clq4pdBCtTY", "5u5Nc1UWXgg",
    "RuKpbA9RSGw", "M4r1vx2ofUQ", "AEMsMi7n5x8", "BKdhQ8GTjbU", "n8cEgbNzGPc", "lODsTsWgyg4",
    "cNrttb3MPlY", "0GxDua-0G98", "-YAB0CUxkPE", "Pu0wYH4CU4E", "cwZBNZkF4UQ", "ujWIfR_rwIg",
    "x2Po_BZM_uI", "tezg1gSJbdo", "VLIHkj5TrlY", "PdOakkv6I1w", "KBWyBfdYy5w", "EpSXZjzrUkg",
    "OUj4Q8qx1ZQ", "1meOdSe6XTQ", "Vh2KJq-lyLk", "5dRbGrDWIOU", "4SR6G0eoDPs", "1Jy-KfZwCeA",
    "jIRuoBkjltc", "UNwx5x2NM9A", "wDcemF2c3Ro", "M73DLRbfn_c", "2pAT2OBDXXk", "yp8Jhjt_png",
    "fcPc573QgjU", "EOAzGVIzo7U", "S3bGcj2Rm5o", "rqqKNukafX0", "EShAj8OeknA", "tRx-ayAnRXA",
    "p3lVBD4ei6k", "WLnv4MwbumM", "F8V90FkxIZU", "qpjQ6ZmhDCo", "nC7OrqXYc6k", "huFkGmp6eaw",
    "cEO4Z7lq-q8", "LzlDy5edLzo", "IoK9hnz8cOs", "4wEIAGRAxHw", "1xwXyuePSak", "ql5bm1VU7oQ",
    "RfwQteCBfYw", "fMz6hOoGHHU", "XzezA5Icqoo", "WO9D0IKmnX0", "9f6_hQtkQsA", "9JQFov6GazM",
    "8wKDBiD4XsA", "uXhyoPjNmaw", "iqRMeq9ajZE", "fxBWfBLLlU", "XTSgskSDKEw", "WkcqB18K60c",
    "TrTFIr8f-n0", "NLi86WxjPvs", "MXOBWa1DLCw", "tfAep2L872E", "itWdwzWn0Sk", "z8_cmTbrlNw",
    "xE_Z_Ph7fYk", "wfqZHr40e0k", "uepx-pu_IOI", "r3ZOW5AQRis", "oo6cucd8FGY", "mNCv-dmYPS8",
    "ltcZaHcarug", "h0kOl31dJoM", "fXluHhS6IGQ", "f9eRf6ccrAs", "bWDAyRa6rGU", "a86i2NFElAk",
    "TX414PPKQTA", "QqJs_d5PWzw", "KsORl3_jgMQ", "KIKPbfhYxPY", "ItzPBWP614E", "I8rX7mfQd90",
    "HvtKsOu48JU", "GtXHDzY1yCA", "DjraTjOS0c4", "BDu-c8m3Elo", "9-ITMd0_Hmc", "3lFpoJyNmSs",
    "3ULbpMIz32w", "Q1zHZ_5WoQo", "m0FGgFsMpNc", "K2uy7wGFFgw", "1x9rWKtrn9Y", "Vnobd_FDp48",
    "H5miyoLIaGk", "ZLIqln6BSGI", "Oqepld-YRaE", "i_NnjpotJ5M", "5r3snDugV8M", "zv7he_TKHpg",
    "q2tjrV2JiZY", "kibfnTlnKBs", "hihAM-CQyzM", "cYstuM4CYsU", "mkdEmQ5RttE", "XO_2jNhCqTw",
    "VWrSZ8BjIyA", "KbYs5YYUK7I", "2ZNxFC--4fE", "qJ3YJ4eywvY", "1vYteBXaOyI", "lsFTKcP9EyA",
    "bz6ejOvk2_U", "vHnENRwluK0", "htnIF4hkZ40", "lZ_3EU7X3yA", "PUR0XbH4LrQ", "Foyc6FTiRnA",
    "oz9aqDD7F_c", "uOSDgSH_T80", "22vPY_1OaLY", "J_1DFaELLPU", "THoRA3aT4og", "SYEqF_FY5Qo",
    "_Vdv7TjMZzQ", "LW9ho4Ftjh8", "sLtVMfyuQfk", "AyNw00TNrCA", "cvArV6EOysI", "m3zcqWEBrI4",
    "YPxyfDqAmYU", "o545mbzprw4", "O5BisaR_30Y", "FyG3JM9_Ga0", "BaMR9ZcA8NU", "AiWGcDOnFhM",
    "o3IYLSbYac4", "cvy9ts-rNTE", "KS83f4N0pwU", "CJUtJQ1rzg4", "slnfBIWMni4", "WdpK14OXYB4",
    "0sZE4i8Y7k4", "hF6YDrfCqbQ", "dYVD26j9ZSc", "bu5dmV11-ok", "bh3QyscC4z4", "4KtjvHTq5jY",
    "nGpwaZusSmc", "6uduAQx_HKA", "KRYSa79bbQE", "Pd1Z0wX93cE", "zOuIiDw9K_A", "c7HeTKiV4-Y",
    "tDv6rkHgV9k", "FAf3MKuOgGE", "nSQYIQA6rB8", "hUc05yg7RYM", "dirjw0TRnJE", "WKsfqws2NOs",
    "VwZ0bzDVIMo", "zQSZpeuS3x0", "SxR-zqtIg0A", "CQYcrKCjxlI", "wKtiP2V9yr0", "o7JY84_bMHQ",
    "sZbyRDGAOD0", "kl6mUw3zIbE", "A32dkTeVQwA", "z8ay9dAhyFg", "862yM3gCsuY", "IOVtbv7ZEjU",
    "Tn6mOEL1zJ0", "wctOLFXwRg4", "wPiw_E_1WBg", "9TJg8_FtCOQ", "vyvXYaF0a04", "Wsr3K2GZfys",
    "RYmw8Et5riA", "3iy5PjmSPNM", "sO7NArY8qhw", "fGdLUtMch5c", "j9nIpp9l99w", "e86X5ipmG9U",
    "imVC38JopIU", "R1TEBqAnkMU", "MwvlyT0O9xE", "xzss0RaYK18", "xHvKyrvQhu8", "c8SNAvOvOOM",
    "vg8EntypJ8c", "cMQAbcUz20g", "dUMxFQeFFbI", "wZWiZD4etXI", "r9fnpDxkCH8", "vKRBn9de308",
    "d7AWyGroqxk", "De3tjz6BhHY", "ByG2m8Rxx60", "yh5nPYJR2Es", "DC0YU_-t0y4", "LqD2vAtHy10",
    "B7DyC125qks", "DMhXbYkz4FQ", "4ZGQMqSWKfw", "bpmWBZqPl_U", "0hJperuzZ_M", "xcsQsXU6Rj8",
    "B6l3x2XrK6w", "0t0VGl6uu5k", "lHVf_1O4AII", "RbyZQyiFFco", "LMEzfV068a4", "pn8YwQlJuyU",
    "-hyVsOSSPbw", "22wYlpKWqC8", "nwuC2NSyixg", "km0hHCZp5RY", "hropvmRz0_M", "uWvlOqpAbMM",
    "xb639LdgDpw", "4wignYcpqe8", "RJTrTeEObog", "xh_360kVOF4", "PMpfH86vnNM", "EvIyzjlyH_0",
    "B8tgwNoJ_8A", "oUNR-I5V8rQ", "b4xLiGq72AM", "SEL5D6ya14M", "2qfgRuoMpcE", "plFa4paRLdA",
    "ceCioX0LYU0", "vPWL8vYPHNM", "2hYr422h1wo", "YLn9COaWyog", "mAwLMgpSBAQ", "VqZUUQ0KVqw",
    "S3twekqjVQc", "rQ19M5WXmbA", "ixRp65POU7k", "NzpBaiboVYU", "_5Y_mEzAOvI", "rqt-LlEloKk",
    "DEdbmXWokTI", "VmL9z7AhPMQ", "UoEO_tK53ck", "UXByUTuzQso", "RuKpbA9RSGw", "tZ-p6ff8s0Y",
    "T460dxv4sNA", "fQ2OExJkSjI",
)
