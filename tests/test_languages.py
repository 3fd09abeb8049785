"""
Tests for the per-language rule catalog.

Representative plural/singular pairs are checked through the public API so
both the rules and their registry bindings are covered.
"""

import pytest

from i18n_inflector import pluralize, singularize
from i18n_inflector.languages import turkic

SINGULARIZE_CASES = [
    ("af", "honde", "hond"),
    ("am", "betoch", "bet"),
    ("ar", "mustahdimin", "mustahdim"),
    ("be", "pradukty", "pradukta"),
    ("bg", "produkti", "produkt"),
    ("br", "bagou", "bag"),
    ("ca", "gats", "gat"),
    ("co", "prodotti", "prodotto"),
    ("cs", "produkty", "produkt"),
    ("cy", "cathod", "cath"),
    ("da", "brugere", "brug"),
    ("de", "produkte", "produkt"),
    ("el", "xristes", "xristis"),
    ("eo", "katoj", "kato"),
    ("es", "usuarios", "usuario"),
    ("an", "usuarios", "usuario"),
    ("et", "kasutajad", "kasutaja"),
    ("eu", "katuak", "katu"),
    ("fa", "ketabha", "ketab"),
    ("fi", "tuotteet", "tuottee"),
    ("fo", "notendur", "notend"),
    ("fr", "utilisateurs", "utilisateur"),
    ("fy", "klanten", "klant"),
    ("ga", "usaideoiri", "usaideoir"),
    ("gd", "usaideoiri", "usaideoir"),
    ("gl", "produtos", "produto"),
    ("gu", "chokrao", "chokra"),
    ("ha", "litattafai", "litattaf"),
    ("he", "meshtatfim", "meshtatf"),
    ("hi", "upyogakartaon", "upyogakarta"),
    ("hr", "korisnici", "korisnik"),
    ("hu", "felhasznalok", "felhasznalo"),
    ("hy", "girqer", "girq"),
    ("is", "notendur", "notend"),
    ("it", "prodotti", "prodotto"),
    ("kk", "kullanicilar", "kullanici"),
    ("kn", "pustakagalu", "pustaka"),
    ("ku", "daristan", "darist"),
    ("kw", "cathod", "cath"),
    ("la", "domini", "dominus"),
    ("lb", "produkte", "produkt"),
    ("lt", "vartotojai", "vartotojas"),
    ("lv", "lietotaji", "lietotajs"),
    ("mk", "korisnici", "korisnik"),
    ("ml", "pustakakal", "pustaka"),
    ("mn", "nomuud", "nom"),
    ("mr", "upyogakartaon", "upyogakarta"),
    ("mt", "utenti", "utent"),
    ("nb", "brukere", "bruk"),
    ("nl", "klanten", "klant"),
    ("oc", "utilisateurs", "utilisateur"),
    ("pl", "produkty", "produkt"),
    ("ps", "kitabuna", "kitab"),
    ("pt", "clientes", "cliente"),
    ("qu", "wasikuna", "wasi"),
    ("ro", "utilizatori", "utilizator"),
    ("ru", "klienti", "klient"),
    ("rw", "vitabuni", "vitabu"),
    ("sk", "produkty", "produkt"),
    ("so", "buugaagyo", "buugaag"),
    ("sq", "perdoruese", "perdorues"),
    ("sv", "produkter", "produkt"),
    ("sw", "vitabuni", "vitabu"),
    ("ta", "pustakakal", "pustaka"),
    ("te", "pustakaalu", "pustakaa"),
    ("tg", "ketabha", "ketab"),
    ("tr", "kullanicilar", "kullanici"),
    ("uk", "produkty", "produkta"),
    ("ur", "upyogakartaon", "upyogakarta"),
    ("xh", "izincwadini", "izincwadi"),
    ("yi", "produktin", "produkt"),
    ("zu", "izincwadini", "izincwadi"),
]

PLURAL_CANDIDATE_CASES = [
    ("af", "kat", "kate"),
    ("ar", "mustahdim", "mustahdimin"),
    ("de", "produkt", "produkte"),
    ("fi", "tuote", "tuotet"),
    ("ha", "littafi", "littafiai"),
    ("he", "meshtatef", "meshtatefim"),
    ("nl", "klant", "klanten"),
    ("pl", "produkt", "produkty"),
    ("sv", "produkt", "produkter"),
    ("zu", "incwadi", "incwadiini"),
]


@pytest.mark.parametrize("locale, plural, singular", SINGULARIZE_CASES)
def test_singularize_representative_word(locale, plural, singular):
    assert singularize(locale, plural) == singular


@pytest.mark.parametrize("locale, singular, plural", PLURAL_CANDIDATE_CASES)
def test_pluralize_offers_expected_candidate(locale, singular, plural):
    assert plural in pluralize(locale, singular)


class TestEnglish:
    @pytest.mark.parametrize(
        "plural, singular",
        [
            ("users", "user"),
            ("categories", "category"),
            ("boxes", "box"),
            ("matches", "match"),
            ("dishes", "dish"),
            ("buzzes", "buzz"),
            ("addresses", "address"),
        ],
    )
    def test_regular_plurals(self, plural, singular):
        assert singularize("en", plural) == singular

    @pytest.mark.parametrize("word", ["status", "bus", "class", "", "s", "x", "es"])
    def test_words_left_unchanged(self, word):
        assert singularize("en", word) == word

    @pytest.mark.parametrize(
        "plural, singular",
        [("children", "child"), ("people", "person"), ("mice", "mouse"), ("feet", "foot")],
    )
    def test_irregular_singular(self, plural, singular):
        assert singularize("en", plural) == singular

    def test_irregular_plural_is_sole_candidate(self):
        assert pluralize("en", "child") == ["children"]
        assert pluralize("en", "person") == ["people"]

    def test_invariant_nouns(self):
        assert singularize("en", "sheep") == "sheep"
        assert singularize("en", "series") == "series"
        assert pluralize("en", "sheep") == ["sheep"]

    def test_suffix_only_es_unchanged(self):
        """Test the bare ending "es" is not reduced to "e"."""
        assert singularize("en", "es") == "es"
        assert singularize("en", "axes") == "ax"

    def test_exception_lookup_is_case_sensitive(self):
        """Test only lowercase irregulars are recognized; other casings use the regular rules."""
        assert singularize("en", "Children") == "Children"
        assert singularize("en", "People") == "People"
        assert pluralize("en", "Child") == ["Childs", "Childes"]
        assert pluralize("en", "Sheep") == ["Sheeps", "Sheepes"]

    def test_regular_candidates(self):
        assert pluralize("en", "user") == ["users", "useres"]
        assert pluralize("en", "category") == ["categorys", "categoryes", "categories"]


class TestTurkish:
    @pytest.mark.parametrize(
        "word, expected",
        [
            ("araba", ["arabalar"]),
            ("kız", ["kızlar"]),
            ("okul", ["okullar"]),
            ("ev", ["evler"]),
            ("göz", ["gözler"]),
            ("gül", ["güller"]),
            ("kullanici", ["kullanicilar", "kullaniciler"]),
            ("krk", ["krklar", "krkler"]),
            ("", ["lar", "ler"]),
        ],
    )
    def test_vowel_harmony(self, word, expected):
        assert pluralize("tr", word) == expected

    def test_harmony_is_case_insensitive(self):
        assert pluralize("tr", "ARABA") == ["ARABAlar"]
        assert pluralize("tr", "EV") == ["EVler"]

    def test_last_vowel_decides(self):
        """Test only the final vowel matters, not earlier ones."""
        assert pluralize("tr", "kalem") == ["kalemler"]
        assert pluralize("tr", "kitap") == ["kitaplar"]

    def test_family_shares_harmony(self):
        assert pluralize("az", "araba") == ["arabalar"]
        assert pluralize("uz", "ev") == ["evler"]

    @pytest.mark.parametrize(
        "word, expected",
        [
            ("KEDİ", ["KEDİler"]),
            ("İP", ["İPler"]),
            ("KİTAP", ["KİTAPlar"]),
            ("hâlâ", ["hâlâlar"]),
            ("sükûn", ["sükûnlar"]),
            ("millî", ["millîler"]),
        ],
    )
    def test_diacritic_vowels_are_unambiguous(self, word, expected):
        """Test dotted capital İ and circumflex vowels pick a single suffix."""
        assert pluralize("tr", word) == expected

    def test_last_vowel(self):
        assert turkic.last_vowel("Araba") == "a"
        assert turkic.last_vowel("krk") is None
        assert turkic.last_vowel("KEDİ") == "İ"
        assert turkic.last_vowel("hâlâ") == "â"

    def test_suffix_only_word_unchanged(self):
        assert singularize("tr", "lar") == "lar"
        assert singularize("tr", "evler") == "ev"


class TestRomance:
    def test_spanish_es_after_consonant(self):
        assert singularize("es", "ciudades") == "ciudad"
        assert pluralize("es", "ciudad") == ["ciudads", "ciudades"]

    def test_portuguese_es_only_after_listed_consonants(self):
        assert singularize("pt", "flores") == "flor"
        assert pluralize("pt", "flor") == ["flors", "flores"]
        assert pluralize("pt", "livro") == ["livros"]

    def test_catalan(self):
        assert singularize("ca", "homes") == "home"
        assert singularize("ca", "mans") == "ma"
        assert pluralize("ca", "gat") == ["gats", "gatns"]

    def test_french_aux(self):
        assert singularize("fr", "journaux") == "journal"
        assert pluralize("fr", "journal") == ["journals", "journaux"]

    def test_italian(self):
        assert singularize("it", "case") == "casa"
        assert pluralize("it", "libro") == ["libri"]
        assert pluralize("it", "casa") == ["case", "casi"]
        assert pluralize("it", "bar") == ["bari"]

    def test_romanian(self):
        assert singularize("ro", "trenuri") == "tren"

    def test_latin(self):
        assert singularize("la", "rosae") == "rosa"
        assert singularize("la", "bella") == "bellum"
        assert pluralize("la", "dominus") == ["domini"]
        assert pluralize("la", "rosa") == ["rosae"]
        assert pluralize("la", "bellum") == ["bella"]
        assert pluralize("la", "rex") == ["rexes"]


class TestSlavic:
    def test_russian_feminine_plural(self):
        assert pluralize("ru", "kniga") == ["knigy", "knigi", "knigay", "knigai"]

    def test_croatian_palatalization(self):
        assert pluralize("hr", "korisnik") == [
            "korisniki",
            "korisnikovi",
            "korisnikevi",
            "korisnici",
        ]
        assert singularize("hr", "gradovi") == "grad"

    def test_czech_enumerates_all_forms(self):
        assert pluralize("cs", "produkt") == ["produkty", "produkte", "produkti"]


class TestBaltic:
    def test_lithuanian(self):
        assert pluralize("lt", "vartotojas") == ["vartotojai"]
        assert pluralize("lt", "knyga") == ["knygos"]
        assert singularize("lt", "knygos") == "knyga"

    def test_latvian(self):
        assert pluralize("lv", "lietotajs") == ["lietotaji"]
        assert pluralize("lv", "mäja") == ["mäjas"]


class TestCeltic:
    @pytest.mark.parametrize(
        "word, expected",
        [("iau", "i"), ("au", "au"), ("oedd", "oedd"), ("od", "od")],
    )
    def test_welsh_suffix_only_words(self, word, expected):
        assert singularize("cy", word) == expected


class TestOtherLanguages:
    def test_greek(self):
        assert pluralize("el", "xristis") == ["xristes", "xristisa", "xristises"]

    def test_hungarian_linking_vowels(self):
        assert pluralize("hu", "felhasznalo") == ["felhasznalok", "felhasznalook", "felhasznaloek"]

    def test_bengali_native_script(self):
        assert singularize("bn", "বইগুলো") == "বই"
        assert "বইগুলি" in pluralize("bn", "বই")

    def test_maltese(self):
        assert singularize("mt", "karozzi") == "karozz"
        assert pluralize("mt", "utent") == ["utenti", "utentijiet"]

    def test_guarani(self):
        assert singularize("gn", "ogakuéra") == "oga"

    @pytest.mark.parametrize("code", ["ja", "zh", "ko", "vi", "id", "th"])
    def test_no_plural_marking(self, code):
        assert singularize(code, "user") == "user"
        assert pluralize(code, "user") == ["user"]
