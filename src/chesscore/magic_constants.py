# Generated by `python -m chesscore.magic_gen`. Do not edit.
"""Precomputed magic constants: one ``(mask, magic, shift)`` triple per square."""

SEED = 0x5eedc0def00dbeef

BISHOP_MAGICS = (
    (0x0040201008040200, 0x44400a0404103240, 58),  # a1
    (0x0000402010080400, 0x1008820414002000, 59),  # b1
    (0x0000004020100a00, 0x4084010202140408, 59),  # c1
    (0x0000000040221400, 0x00c80a0020400804, 59),  # d1
    (0x0000000002442800, 0x4682021000020800, 59),  # e1
    (0x0000000204085000, 0x0082080444120020, 59),  # f1
    (0x0000020408102000, 0x0008809010104022, 59),  # g1
    (0x0002040810204000, 0x020d140708021042, 58),  # h1
    (0x0020100804020000, 0x40001064900c0042, 59),  # a2
    (0x0040201008040000, 0x0100110208010020, 59),  # b2
    (0x00004020100a0000, 0x0a00102420484010, 59),  # c2
    (0x0000004022140000, 0xd00c020a02030100, 59),  # d2
    (0x0000000244280000, 0x0348011040000004, 59),  # e2
    (0x0000020408500000, 0x0404010482402c40, 59),  # f2
    (0x0002040810200000, 0x0008009088884004, 59),  # g2
    (0x0004081020400000, 0x0000888048080444, 59),  # h2
    (0x0010080402000200, 0x004200c408822401, 59),  # a3
    (0x0020100804000400, 0xc104004250020200, 59),  # b3
    (0x004020100a000a00, 0x0021001808010410, 57),  # c3
    (0x0000402214001400, 0x8f4400082c009008, 57),  # d3
    (0x0000024428002800, 0x0009000820080000, 57),  # e3
    (0x0002040850005000, 0x0804085202120208, 57),  # f3
    (0x0004081020002000, 0x004e4444240a2800, 59),  # g3
    (0x0008102040004000, 0x4040300200920810, 59),  # h3
    (0x0008040200020400, 0x0004201010600140, 59),  # a4
    (0x0010080400040800, 0x0404110420420080, 59),  # b4
    (0x0020100a000a1000, 0x0000404128008300, 57),  # c4
    (0x0040221400142200, 0x080c00400c010103, 55),  # d4
    (0x0002442800284400, 0x0002040182008202, 55),  # e4
    (0x0004085000500800, 0x4800838008082400, 57),  # f4
    (0x0008102000201000, 0x34040d0004088289, 59),  # g4
    (0x0010204000402000, 0x4000404402010420, 59),  # h4
    (0x0004020002040800, 0x101802b000092010, 59),  # a5
    (0x0008040004081000, 0x3802224204109000, 59),  # b5
    (0x00100a000a102000, 0x8000109001020404, 57),  # c5
    (0x0022140014224000, 0x0080c00a00102200, 55),  # d5
    (0x0044280028440200, 0x0024010400060082, 55),  # e5
    (0x0008500050080400, 0x0010208200002210, 57),  # f5
    (0x0010200020100800, 0x0002080040033409, 59),  # g5
    (0x0020400040201000, 0x201c008230108400, 59),  # h5
    (0x0002000204081000, 0x0082082104808842, 59),  # a6
    (0x0004000408102000, 0x5044370402111000, 59),  # b6
    (0x000a000a10204000, 0x0402211410002202, 57),  # c6
    (0x0014001422400000, 0x0040024200800801, 57),  # d6
    (0x0028002844020000, 0x2008084101001010, 57),  # e6
    (0x0050005008040200, 0x0240408822800440, 57),  # f6
    (0x0020002010080400, 0x2310504200400080, 59),  # g6
    (0x0040004020100800, 0x4104940400440020, 59),  # h6
    (0x0000020408102000, 0x0004020804068801, 59),  # a7
    (0x0000040810204000, 0x4c81140082081000, 59),  # b7
    (0x00000a1020400000, 0x04000b0890900804, 59),  # c7
    (0x0000142240000000, 0x0001420042022404, 59),  # d7
    (0x0000284402000000, 0x2108809082088040, 59),  # e7
    (0x0000500804020000, 0x0000043022021204, 59),  # f7
    (0x0000201008040200, 0x4a4110c122008000, 59),  # g7
    (0x0000402010080400, 0x818210c200890000, 59),  # h7
    (0x0002040810204000, 0x4002060042084402, 58),  # a8
    (0x0004081020400000, 0x1820022402021100, 59),  # b8
    (0x000a102040000000, 0x0021594084844100, 59),  # c8
    (0x0014224000000000, 0x1282248200840400, 59),  # d8
    (0x0028440200000000, 0x0040000810202202, 59),  # e8
    (0x0050080402000000, 0x01ca002020924a22, 59),  # f8
    (0x0020100804020000, 0x0a00315208410401, 59),  # g8
    (0x0040201008040200, 0x0028207502002900, 58),  # h8
)

ROOK_MAGICS = (
    (0x000101010101017e, 0xa080002080400011, 52),  # a1
    (0x000202020202027c, 0x2440004010002000, 53),  # b1
    (0x000404040404047a, 0x0200100880220040, 53),  # c1
    (0x0008080808080876, 0x4180080010018004, 53),  # d1
    (0x001010101010106e, 0x0080040080080002, 53),  # e1
    (0x002020202020205e, 0x6080040002008001, 53),  # f1
    (0x004040404040403e, 0x0080010002000080, 53),  # g1
    (0x008080808080807e, 0x8200002201009044, 52),  # h1
    (0x0001010101017e00, 0x0010800080400028, 53),  # a2
    (0x0002020202027c00, 0x8802002100408a04, 54),  # b2
    (0x0004040404047a00, 0xc002002010820440, 54),  # c2
    (0x0008080808087600, 0x0002001200084022, 54),  # d2
    (0x0010101010106e00, 0x4001000608001100, 54),  # e2
    (0x0020202020205e00, 0x0045000400084300, 54),  # f2
    (0x0040404040403e00, 0x0004800100220080, 54),  # g2
    (0x0080808080807e00, 0xd1820010a0440102, 53),  # h2
    (0x00010101017e0100, 0x0000808000400020, 53),  # a3
    (0x00020202027c0200, 0x0010064006200140, 54),  # b3
    (0x00040404047a0400, 0x0400410011002000, 54),  # c3
    (0x0008080808760800, 0x0028010100100020, 54),  # d3
    (0x00101010106e1000, 0x0144010100100800, 54),  # e3
    (0x00202020205e2000, 0x0b0a008002040080, 54),  # f3
    (0x00404040403e4000, 0x1082004080010040, 54),  # g3
    (0x00808080807e8000, 0x1102060002658401, 53),  # h3
    (0x000101017e010100, 0x0222800180204000, 53),  # a4
    (0x000202027c020200, 0x0020100040204000, 54),  # b4
    (0x000404047a040400, 0x0008110100200040, 54),  # c4
    (0x0008080876080800, 0x00e8080080801000, 54),  # d4
    (0x001010106e101000, 0x0000080080040080, 54),  # e4
    (0x002020205e202000, 0x0012000600081410, 54),  # f4
    (0x004040403e404000, 0x0002000200010408, 54),  # g4
    (0x008080807e808000, 0x1400040200008041, 53),  # h4
    (0x0001017e01010100, 0x1500844012800028, 53),  # a5
    (0x0002027c02020200, 0x9040005000402000, 54),  # b5
    (0x0004047a04040400, 0x0204801202002042, 54),  # c5
    (0x0008087608080800, 0x0880100080800800, 54),  # d5
    (0x0010106e10101000, 0xa008800801800400, 54),  # e5
    (0x0020205e20202000, 0x0800800400800200, 54),  # f5
    (0x0040403e40404000, 0x1000412204003008, 54),  # g5
    (0x0080807e80808000, 0x000008a042000409, 53),  # h5
    (0x00017e0101010100, 0x0240208040048004, 53),  # a6
    (0x00027c0202020200, 0x4020100040224000, 54),  # b6
    (0x00047a0404040400, 0x0002004020820010, 54),  # c6
    (0x0008760808080800, 0x0064081001010021, 54),  # d6
    (0x00106e1010101000, 0x1429010408010010, 54),  # e6
    (0x00205e2020202000, 0x2014000d00050009, 54),  # f6
    (0x00403e4040404000, 0x000a280150140092, 54),  # g6
    (0x00807e8080808000, 0x0010340040820001, 53),  # h6
    (0x007e010101010100, 0x8010800228400180, 53),  # a7
    (0x007c020202020200, 0x0003042208824a00, 54),  # b7
    (0x007a040404040400, 0x0001002004104100, 54),  # c7
    (0x0076080808080800, 0x0340080110008480, 54),  # d7
    (0x006e101010101000, 0x4000802041001002, 54),  # e7
    (0x005e202020202000, 0x0002040080020080, 54),  # f7
    (0x003e404040404000, 0x6002485007620400, 54),  # g7
    (0x007e808080808000, 0x0112064104118a00, 53),  # h7
    (0x7e01010101010100, 0x4051001a8001c021, 52),  # a8
    (0x7c02020202020200, 0x204a104003208301, 53),  # b8
    (0x7a04040404040400, 0x0001042000120841, 53),  # c8
    (0x7608080808080800, 0x0031201001000805, 53),  # d8
    (0x6e10101010101000, 0x0002008460081102, 53),  # e8
    (0x5e20202020202000, 0x0041000802040003, 53),  # f8
    (0x3e40404040404000, 0x405010022800c104, 53),  # g8
    (0x7e80808080808000, 0xa80211040880c022, 52),  # h8
)
