def is_prime(n: int) -> bool:
    if n < 2:
        return False
    if n == 2:
        return True
    if n % 2 == 0:
        return False
    i = 3
    while i * i <= n:
        if n % i == 0:
            return False
        i += 2
    return True

def factorize(n: int) -> list[int]:
    """ Returns the prime factors of n with multiplicity, smallest first.

    Args:
        n (int): Integer >= 2. Smaller values are outside the contract and give [].

    Returns:
        list[int]: Primes whose product is n, e.g. 12 -> [2, 2, 3].
    """
    factors = []
    remaining = n

    while remaining > 1 and remaining % 2 == 0:
        factors.append(2)
        remaining //= 2

    i = 3
    while i * i <= remaining:
        while remaining % i == 0:
            factors.append(i)
            remaining //= i
        i += 2

    # Whatever survives trial division up to its square root is prime
    if remaining > 2:
        factors.append(remaining)

    return factors
