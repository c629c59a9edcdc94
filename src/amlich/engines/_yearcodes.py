"""
amlich.engines._yearcodes
-------------------------
Packed lunar year codes, one per solar year, partitioned by century
(TK13 = 1200..1299, ..., TK22 = 2100..2199).

Layout of a code (see amlich.engines.yearcode.YearCode):
  bits 0-3   leap month number (0 = none)
  bits 4-15  month lengths, month 1 at bit 15 down to month 12 at bit 4 (1 = 30 days)
  bit 16     leap month length (1 = 30 days)
  bits 17+   days from 1 January to Tết

TK19..TK22 are Hồ Ngọc Đức's published tables. TK13..TK18 and the lead-in
code for lunar year 1199 were generated by amlich.design.year_codes with
the same new-moon / solar-term method (UTC+8, the convention used before
1968); the generated years chain without gaps into the published 1800
entry. That method disagrees with the published tables in 33 of their 400
years, so early years may be a day off at some month boundaries.

Regenerate with `python -m amlich.design.year_codes` rather than editing
by hand.
"""

from typing import Tuple

# Lunar year 1199; only its tail is reachable (January 1200 before Tết).
LEAD_IN_1199 = 0x36ad50

TK13: Tuple[int, ...] = (
    0x225b54, 0x464bb0, 0x3225b0, 0x1c6572, 0x4252b0, 0x2a6aa6, 0x4ee950, 0x3a6aa0, 0x25aaa4, 0x489b50,
    0x344b60, 0x1eaae3, 0x44a4f0, 0x2e52d7, 0x52d260, 0x3cd550, 0x285d55, 0x4c56a0, 0x3696d0, 0x2255d3,
    0x484ae0, 0x30a4d0, 0x1ae4d2, 0x40d250, 0x2ad656, 0x4eb540, 0x38b5a0, 0x249da4, 0x4a95b0, 0x3449b0,
    0x1ea973, 0x44a4b0, 0x2eb2b7, 0x526a50, 0x3c6d40, 0x26af56, 0x4e2b60, 0x369370, 0x2342f4, 0x484970,
    0x3264b0, 0x1b54a2, 0x3eea50, 0x2b6a96, 0x5056d0, 0x3a2b60, 0x2496e4, 0x4a92e0, 0x34c960, 0x1dc953,
    0x42d4a0, 0x2cdaa8, 0x52b550, 0x3c56a0, 0x27a5b5, 0x4e25d0, 0x3892d0, 0x21a2b4, 0x46a950, 0x30b4a0,
    0x1aeaa1, 0x3ead50, 0x2a5756, 0x504ba0, 0x3aa5b0, 0x245575, 0x4a52b0, 0x346930, 0x1f6953, 0x426aa0,
    0x2cada8, 0x529b50, 0x3e4b60, 0x27a2e5, 0x4ca4f0, 0x385260, 0x21e264, 0x44d550, 0x305aa0, 0x1b96a2,
    0x4096d0, 0x2b49d6, 0x5049d0, 0x3aa4d0, 0x24d4d5, 0x48b250, 0x32b520, 0x1dd543, 0x42b5a0, 0x2d95a8,
    0x5295b0, 0x3e49b0, 0x28a576, 0x4ca4b0, 0x36aa50, 0x20ba54, 0x466d40, 0x2eada0, 0x1a6b62, 0x409370,
)

TK14: Tuple[int, ...] = (
    0x2c4af6, 0x504970, 0x3a64b0, 0x246ca5, 0x48da50, 0x325aa0, 0x1cb6c3, 0x42aae0, 0x2e92fb, 0x5292e0,
    0x3cc960, 0x26d556, 0x4cd4a0, 0x34d950, 0x215554, 0x4656a0, 0x30a6d0, 0x1a65d2, 0x4092d0, 0x2aaab6,
    0x50a950, 0x38b4a0, 0x23b2a5, 0x48ad50, 0x3455a0, 0x1caba3, 0x42a5b0, 0x2e5377, 0x545270, 0x3c6930,
    0x276956, 0x4c6aa0, 0x36ab50, 0x214b54, 0x464b60, 0x30a570, 0x1c62e2, 0x3ed260, 0x28ea66, 0x4ed520,
    0x38daa0, 0x225ea5, 0x4856d0, 0x344ae0, 0x1ea9d3, 0x42a2d0, 0x2cd1b8, 0x52aa50, 0x3cb520, 0x25d546,
    0x4aada0, 0x3655d0, 0x2345b4, 0x4649b0, 0x30a2b0, 0x1bc2b3, 0x40aa50, 0x29b457, 0x4e6b20, 0x38ad60,
    0x255365, 0x489370, 0x344970, 0x1ea573, 0x4452b0, 0x2c6aa8, 0x50da50, 0x3c5aa0, 0x26aec5, 0x4aa6e0,
    0x3652e0, 0x21c2e4, 0x46a960, 0x2ed4a0, 0x18f2a3, 0x3ed550, 0x2a5b57, 0x4e56a0, 0x38a6d0, 0x2455d5,
    0x4a52d0, 0x32a950, 0x1cd954, 0x42b2a0, 0x2cb5a8, 0x50ad50, 0x3c4da0, 0x26a7a6, 0x4ca5b0, 0x3651b0,
    0x21a174, 0x466530, 0x306a90, 0x19aaa2, 0x3eab50, 0x2b2b57, 0x502b60, 0x38a570, 0x2452e5, 0x48d160,
)

TK15: Tuple[int, ...] = (
    0x32e4b0, 0x1c7523, 0x40daa0, 0x2c5b5c, 0x5256d0, 0x3c2ae0, 0x26a5d5, 0x4ca2d0, 0x36d150, 0x1ed954,
    0x44b520, 0x2ed690, 0x1a6da2, 0x3e55d0, 0x2a2bb6, 0x5045b0, 0x3aa2b0, 0x22aab5, 0x48a950, 0x32b520,
    0x1cbb24, 0x40ad60, 0x2c55b0, 0x184b71, 0x3e4570, 0x275176, 0x4c52b0, 0x366950, 0x216954, 0x445aa0,
    0x2eab50, 0x1a66d2, 0x404ae0, 0x28a6e6, 0x4ea560, 0x38d2a0, 0x22eaa5, 0x46d550, 0x3256a0, 0x1cb5a3,
    0x4295d0, 0x2c4ae0, 0x16cab1, 0x3ca4d0, 0x27d0d6, 0x4ab2a0, 0x34b550, 0x205d54, 0x462da0, 0x2e95d0,
    0x1a5573, 0x4049b0, 0x2aa577, 0x4e64b0, 0x386a90, 0x23aaa5, 0x486b50, 0x322b60, 0x1d8b63, 0x429370,
    0x2e4970, 0x174961, 0x3ae4b0, 0x276926, 0x4ada90, 0x345ad0, 0x2126d4, 0x462ae0, 0x3092e0, 0x18d2d3,
    0x3ec950, 0x28d557, 0x4eb4a0, 0x36b690, 0x2355a5, 0x4855d0, 0x3425d0, 0x1c95b4, 0x4292b0, 0x2ca9b8,
    0x52a950, 0x3ab4a0, 0x24b6a6, 0x4aab60, 0x3655b0, 0x202b74, 0x462570, 0x3052b0, 0x1ab2b3, 0x3e6950,
    0x286d57, 0x4e5aa0, 0x38ab50, 0x224ed5, 0x484ae0, 0x32a570, 0x1e5564, 0x40d2a0, 0x2ad96a, 0x50b550,
)

TK16: Tuple[int, ...] = (
    0x3c56a0, 0x2599a6, 0x4a95d0, 0x364ae0, 0x20a9b4, 0x44a4d0, 0x2ed250, 0x19ca93, 0x3eb550, 0x285757,
    0x4e2da0, 0x3895b0, 0x244b75, 0x4849b0, 0x32a4b0, 0x1cb4b4, 0x426a50, 0x2aad50, 0x165b51, 0x3c2b60,
    0x2696e6, 0x4a9370, 0x364970, 0x206964, 0x44d4a0, 0x2cea50, 0x187a93, 0x3e5ad0, 0x2a2bd8, 0x4e26e0,
    0x3892e0, 0x22cad5, 0x48c950, 0x30d4a0, 0x1bd4a4, 0x40b650, 0x2c56d0, 0x1655b1, 0x3c25d0, 0x2791b6,
    0x4c92b0, 0x34a950, 0x1fb155, 0x446ca0, 0x2eb550, 0x194b53, 0x3e4db0, 0x2b2577, 0x502570, 0x3852b0,
    0x22aaa5, 0x46e950, 0x326aa0, 0x1baaa4, 0x40ab50, 0x2c4b60, 0x16cae1, 0x3aa570, 0x2750d6, 0x4ad260,
    0x34d950, 0x1e5d55, 0x4456a0, 0x2e96d0, 0x1a55d3, 0x3e4ae0, 0x28a5b7, 0x4ea4d0, 0x38d250, 0x20d696,
    0x46b550, 0x3236a0, 0x1c9da4, 0x4095b0, 0x2c49b0, 0x178972, 0x3ca4b0, 0x24b2b7, 0x4a6a50, 0x346d40,
    0x1fab55, 0x442b60, 0x2e9570, 0x2e52f3, 0x544970, 0x3c6567, 0x60d4a0, 0x4aea50, 0x366e95, 0x5a56d0,
    0x462b60, 0x3096e4, 0x5692e0, 0x3ec960, 0x28e952, 0x4ed4a0, 0x38daa7, 0x5cb550, 0x4856a0, 0x32adb4,
)

TK17: Tuple[int, ...] = (
    0x5a25d0, 0x4292d0, 0x2cd2b3, 0x52a950, 0x3cb557, 0x606aa0, 0x4aad50, 0x365756, 0x5c4ba0, 0x44a5b0,
    0x305574, 0x5652b0, 0x406950, 0x296952, 0x4e6aa0, 0x38aea6, 0x5eab50, 0x484b60, 0x32aae4, 0x58a4f0,
    0x445260, 0x2af263, 0x50d950, 0x3d5a58, 0x6256a0, 0x4a96d0, 0x364dd5, 0x5c4ad0, 0x46a4d0, 0x2ed4d4,
    0x54b250, 0x3ed520, 0x28f542, 0x4cb5a0, 0x3897a7, 0x5e95b0, 0x4a49b0, 0x33a175, 0x58a4b0, 0x42aa50,
    0x2daa53, 0x506d40, 0x3aadab, 0x60ab60, 0x4c9370, 0x364af5, 0x5c4970, 0x4664b0, 0x3164a4, 0x52ea50,
    0x3e6b20, 0x28d6c1, 0x4eab60, 0x3992d6, 0x5e92e0, 0x48c960, 0x33d155, 0x56d4a0, 0x40da50, 0x2d5553,
    0x5256a0, 0x3ba6b8, 0x6225d0, 0x4c92d0, 0x36aab6, 0x5aa950, 0x44b4a0, 0x2ebaa4, 0x54ad50, 0x3e55a0,
    0x298ba2, 0x4ea5b0, 0x3a5377, 0x5e5270, 0x486930, 0x337155, 0x586aa0, 0x40ad50, 0x2c5b53, 0x524b60,
    0x3ca5e8, 0x60a4e0, 0x4ad260, 0x34ea66, 0x5ad530, 0x445aa0, 0x2f66a4, 0x5496d0, 0x404ae0, 0x28a9d3,
    0x4ea4d0, 0x38d2b7, 0x5eb250, 0x46d520, 0x30dd45, 0x56b5a0, 0x4255d0, 0x2c55b3, 0x5249b0, 0x3ca577,
)

TK18: Tuple[int, ...] = (
    0x62a4b0, 0x4caa50, 0x36b656, 0x5c6d20, 0x46ad60, 0x305b64, 0x569370, 0x424970, 0x2ca973, 0x5064b0,
    0x3a6aa7, 0x5eda50, 0x4a5aa0, 0x32aec5, 0x58aae0, 0x4492e0, 0x2ed2e3, 0x52c960, 0x3dd458, 0x62d4a0,
    0x4cd950, 0x375956, 0x5c56a0, 0x46a6d0, 0x3255d4, 0x5652d0, 0x40a950, 0x2ae952, 0x50b4a0, 0x39b4a7,
    0x5ead50, 0x4a55a0, 0x35a3a5, 0x58a5b0, 0x4452b0, 0x2fa174, 0x546930, 0x3c6ab9, 0x626aa0, 0x4cab50,
    0x384f56, 0x5c4b60, 0x46a570, 0x3252e4, 0x56d160, 0x3ee930, 0x2a7523, 0x4edaa0, 0x3b5aa7, 0x5e56d0,
    0x4a4ae0, 0x35a1d5, 0x5aa2d0, 0x42d150, 0x2cda54, 0x52b520, 0x3cd6a9, 0x60ada0, 0x4c55d0, 0x3949b6,
    0x5e45b0, 0x46a2b0, 0x30b2b5, 0x56a950, 0x40b520, 0x29ab22, 0x4ead60, 0x3b5567, 0x609370, 0x4a4570,
    0x346575, 0x5a52b0, 0x446950, 0x2c7953, 0x525aa0, 0x3cab6a, 0x62a6d0, 0x4c4ae0, 0x36c6e6, 0x5ca960,
    0x46d4a0, 0x2eeaa5, 0x54d550, 0x405aa0, 0x2ab6a3, 0x4ea6d0, 0x3a4bd7, 0x604ad0, 0x4aa8d0, 0x32d556,
    0x58b2a0, 0x42b550, 0x2e5d54, 0x524da0, 0x3c95d0, 0x285572, 0x4e51b0, 0x36a976, 0x5c64b0, 0x466a90,
)

TK19: Tuple[int, ...] = (
    0x30baa3, 0x56ab50, 0x422ba0, 0x2cab61, 0x52a370, 0x3c51e8, 0x60d160, 0x4ae4b0, 0x376926, 0x58daa0,
    0x445b50, 0x3116d2, 0x562ae0, 0x3ea2e0, 0x28e2d2, 0x4ec950, 0x38d556, 0x5cb520, 0x46b690, 0x325da4,
    0x5855d0, 0x4225d0, 0x2ca5b3, 0x52a2b0, 0x3da8b7, 0x60a950, 0x4ab4a0, 0x35b2a5, 0x5aad50, 0x4455b0,
    0x302b74, 0x562570, 0x4052f9, 0x6452b0, 0x4e6950, 0x386d56, 0x5e5aa0, 0x46ab50, 0x3256d4, 0x584ae0,
    0x42a570, 0x2d4553, 0x50d2a0, 0x3be8a7, 0x60d550, 0x4a5aa0, 0x34ada5, 0x5a95d0, 0x464ae0, 0x2eaab4,
    0x54a4d0, 0x3ed2b8, 0x64b290, 0x4cb550, 0x385757, 0x5e2da0, 0x4895d0, 0x324d75, 0x5849b0, 0x42a4b0,
    0x2da4b3, 0x506a90, 0x3aad98, 0x606b50, 0x4c2b60, 0x359365, 0x5a9370, 0x464970, 0x306964, 0x52e4a0,
    0x3cea6a, 0x62da90, 0x4e5ad0, 0x392ad6, 0x5e2ae0, 0x4892e0, 0x32cad5, 0x56c950, 0x40d4a0, 0x2bd4a3,
    0x50b690, 0x3a57a7, 0x6055b0, 0x4c25d0, 0x3695b5, 0x5a92b0, 0x44a950, 0x2ed954, 0x54b4a0, 0x3cb550,
    0x286b52, 0x4e55b0, 0x3a2776, 0x5e2570, 0x4852b0, 0x32aaa5, 0x56e950, 0x406aa0, 0x2abaa3, 0x50ab50,
)

TK20: Tuple[int, ...] = (
    0x3c4bd8, 0x624ae0, 0x4ca570, 0x3854d5, 0x5cd260, 0x44d950, 0x315554, 0x5656a0, 0x409ad0, 0x2a55d2,
    0x504ae0, 0x3aa5b6, 0x60a4d0, 0x48d250, 0x33d255, 0x58b540, 0x42d6a0, 0x2cada2, 0x5295b0, 0x3f4977,
    0x644970, 0x4ca4b0, 0x36b4b5, 0x5c6a50, 0x466d50, 0x312b54, 0x562b60, 0x409570, 0x2c52f2, 0x504970,
    0x3a6566, 0x5ed4a0, 0x48ea50, 0x336a95, 0x585ad0, 0x442b60, 0x2f86e3, 0x5292e0, 0x3dc8d7, 0x62c950,
    0x4cd4a0, 0x35d8a6, 0x5ab550, 0x4656a0, 0x31a5b4, 0x5625d0, 0x4092d0, 0x2ad2b2, 0x50a950, 0x38b557,
    0x5e6ca0, 0x48b550, 0x355355, 0x584da0, 0x42a5b0, 0x2f4573, 0x5452b0, 0x3ca9a8, 0x60e950, 0x4c6aa0,
    0x36aea6, 0x5aab50, 0x464b60, 0x30aae4, 0x56a570, 0x405260, 0x28f263, 0x4ed940, 0x38db47, 0x5cd6a0,
    0x4896d0, 0x344dd5, 0x5a4ad0, 0x42a4d0, 0x2cd4b4, 0x52b250, 0x3cd558, 0x60b540, 0x4ab5a0, 0x3755a6,
    0x5c95b0, 0x4649b0, 0x30a974, 0x56a4b0, 0x40aa50, 0x29aa52, 0x4e6d20, 0x39ad47, 0x5eab60, 0x489370,
    0x344af5, 0x5a4970, 0x4464b0, 0x2c74a3, 0x50ea50, 0x3d6a58, 0x6256a0, 0x4aaad0, 0x3696d5, 0x5c92e0,
)

TK21: Tuple[int, ...] = (
    0x46c960, 0x2ed954, 0x54d4a0, 0x3eda50, 0x2a7552, 0x4e56a0, 0x38a7a7, 0x5ea5d0, 0x4a92b0, 0x32aab5,
    0x58a950, 0x42b4a0, 0x2cbaa4, 0x50ad50, 0x3c55d9, 0x624ba0, 0x4ca5b0, 0x375176, 0x5c5270, 0x466930,
    0x307934, 0x546aa0, 0x3ead50, 0x2a5b52, 0x504b60, 0x38a6e6, 0x5ea4e0, 0x48d260, 0x32ea65, 0x56d520,
    0x40daa0, 0x2d56a3, 0x5256d0, 0x3c4afb, 0x6249d0, 0x4ca4d0, 0x37d0b6, 0x5ab250, 0x44b520, 0x2edd25,
    0x54b5a0, 0x3e55d0, 0x2a55b2, 0x5049b0, 0x3aa577, 0x5ea4b0, 0x48aa50, 0x33b255, 0x586d20, 0x40ad60,
    0x2d4b63, 0x525370, 0x3e49e8, 0x60c970, 0x4c54b0, 0x3768a6, 0x5ada50, 0x445aa0, 0x2fa6a4, 0x54aad0,
    0x4052e0, 0x28d2e3, 0x4ec950, 0x38d557, 0x5ed4a0, 0x46d950, 0x325d55, 0x5856a0, 0x42a6d0, 0x2c55d4,
    0x5252b0, 0x3ca9b8, 0x62a930, 0x4ab490, 0x34b6a6, 0x5aad50, 0x4655a0, 0x2eab64, 0x54a570, 0x4052b0,
    0x2ab173, 0x4e6930, 0x386b37, 0x5e6aa0, 0x48ad50, 0x332ad5, 0x582b60, 0x42a570, 0x2e52e4, 0x50d160,
    0x3ae958, 0x60d520, 0x4ada90, 0x355aa6, 0x5a56d0, 0x462ae0, 0x30a9d4, 0x54a2d0, 0x3ed150, 0x28e952,
)

TK22: Tuple[int, ...] = (
    0x4eb520, 0x38d727, 0x5eada0, 0x4a55b0, 0x362db5, 0x5a45b0, 0x44a2b0, 0x2eb2b4, 0x54a950, 0x3cb559,
    0x626b20, 0x4cad50, 0x385766, 0x5c5370, 0x484570, 0x326574, 0x5852b0, 0x406950, 0x2a7953, 0x505aa0,
    0x3baaa7, 0x5ea6d0, 0x4a4ae0, 0x35a2e5, 0x5aa550, 0x42d2a0, 0x2de2a4, 0x52d550, 0x3e5abb, 0x6256a0,
    0x4c96d0, 0x3949b6, 0x5e4ab0, 0x46a8d0, 0x30d4b5, 0x56b290, 0x40b550, 0x2a6d52, 0x504da0, 0x3b9567,
    0x609570, 0x4a49b0, 0x34a975, 0x5a64b0, 0x446a90, 0x2cba94, 0x526b50, 0x3e2b60, 0x28ab61, 0x4c9570,
    0x384ae6, 0x5cd160, 0x46e4a0, 0x2eed25, 0x54da90, 0x405b50, 0x2c36d3, 0x502ae0, 0x3a93d7, 0x6092d0,
    0x4ac950, 0x32d556, 0x58b4a0, 0x42b690, 0x2e5d94, 0x5255b0, 0x3e25fa, 0x6425b0, 0x4e92b0, 0x36aab6,
    0x5c6950, 0x4674a0, 0x31b2a5, 0x54ad50, 0x4055a0, 0x2aab73, 0x522570, 0x3a5377, 0x6052b0, 0x4a6950,
    0x346d56, 0x585aa0, 0x42ab50, 0x2e56d4, 0x544ae0, 0x3ca570, 0x2864d2, 0x4cd260, 0x36eaa6, 0x5ad550,
    0x465aa0, 0x30ada5, 0x5695d0, 0x404ad0, 0x2aa9b3, 0x50a4d0, 0x3ad2b7, 0x5eb250, 0x48b540, 0x33d556,
)
