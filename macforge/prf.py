from macforge.bits import combine


# F_k(x) = k xor x, um "PRF" so para fins didaticos
def Fk(key, input_bits):
    return combine(key, input_bits)
