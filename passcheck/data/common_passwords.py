"""
Default common-password set: lowercase strings, queried case-insensitively.

Callers can pass their own set to `analyze`; sourcing a larger list is out of
scope here.
"""

COMMON_PASSWORDS = frozenset(
    word.lower()
    for word in (
        "123456", "123456789", "password", "12345678", "qwerty", "12345",
        "1234567890", "1234567", "qwerty123", "1q2w3e", "111111", "123123",
        "abc123", "password1", "iloveyou", "admin", "welcome", "monkey", "dragon",
        "passw0rd", "letmein", "baseball", "football", "shadow", "master",
        "killer", "superman", "login", "flower", "hottie", "loveme", "zaq1zaq1",
        "password123", "zaq12wsx", "qazwsx", "trustno1", "starwars", "654321",
        "batman", "zaq1@WSX", "mustang", "michael", "pokemon", "computer",
        "internet", "hello", "freedom", "whatever", "qwertyuiop", "1qaz2wsx",
        "dragon123", "password!", "summer", "donald", "football1", "princess",
        "azerty", "pass", "pass1234", "qwe123", "1234", "1q2w3e4r", "555555",
        "loveyou", "123qwe", "passwords", "welcome1", "11111111", "987654321",
        "121212", "000000", "qwerty1", "1q2w3e4", "00000000", "ashley", "fluffy",
        "mynoob", "superman1", "charlie", "andrew", "letmein1", "monkey123",
        "hello123", "123321", "!@#$%^", "password1!", "zaq!@WSX", "1qaz2wsx3edc",
        "football123", "qwertyui", "qwer1234", "welcome123", "loveme123",
        "1q2w3e4r5t", "!@#$", "marina", "hannah", "michael1", "nicole", "jessica",
        "daniel", "jordan", "hunter", "buster", "soccer", "killer123", "passw0rd1",
        "steven", "tigger", "bailey", "pepper", "gregory", "summer123", "1qazxsw2",
        "flower123", "147258369", "mypass", "mypassword", "q1w2e3r4", "trustno1!",
        "cookie", "computer1", "qweasd", "asdfgh", "asdf1234", "zxcvbnm", "zxcvbn",
        "zaq12swx", "159753", "159357", "aa123456", "qweqwe", "monkey1", "shadow1",
        "iloveyou1", "123abc", "password1234", "abc123456", "qazwsxedc",
        "1qaz2wsx3", "love"
    )
)
