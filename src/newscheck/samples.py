"""Built-in sample texts for trying the scorer."""

from types import MappingProxyType

SAMPLES = MappingProxyType(
    {
        "real": (
            "Springfield Hospital announced a new cancer treatment center opening March 1, 2024. "
            "Dr. Sarah Martinez, the hospital's chief of oncology, said the facility will serve approximately "
            "500 patients annually. According to the American Cancer Society, the region has seen a 12% increase "
            "in cancer diagnoses over the past five years. The $15 million center was funded through a combination "
            "of hospital reserves, state grants, and private donations, as confirmed by hospital spokesperson "
            "John Davis. Harvard Medical School researchers will collaborate on clinical trials at the new facility."
        ),
        "fake": (
            "SHOCKING: Scientists DISCOVER miracle cure that DESTROYS cancer in 24 hours! Big Pharma DOESN'T want "
            "you to know! This secret remedy has been suppressed by the pharmaceutical industry for decades because "
            "it threatens their billion-dollar cancer treatment business. Doctors are FURIOUS because this simple "
            "kitchen ingredient can eliminate cancer cells instantly! The mainstream media refuses to report on "
            "this AMAZING breakthrough!"
        ),
        "ai": (
            "As an AI language model, I can provide information about cancer research. Based on my training data, "
            "there have been advances in treatment. However, I don't have access to real-time information, and I "
            "cannot provide medical advice. According to my last update, immunotherapy has shown promising results "
            "in treating certain types of cancer, but I cannot browse current medical journals or access the latest "
            "research findings."
        ),
        "borderline": (
            "New cancer treatment shows promising results in early trials. The experimental therapy, which combines "
            "traditional approaches with alternative methods, has helped some patients see improvement. While "
            "medical experts are cautiously optimistic, more research is needed before drawing conclusions. Some "
            "patients have reported significant benefits, though results vary widely."
        ),
    }
)
