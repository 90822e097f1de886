import unittest

from foodcoach.domain.LabResult import LabResult
from foodcoach.logic.reporting.lab_summary import NO_DATA, summarize_lab_result
from foodcoach.tests.fakes import LAB_JSON


def _lab(*markers):
    return LabResult.from_dict({"id": "lab_t", "date": "2024-05-15", "markers": [
        {"name": name, "value": 1, "unit": "", "status": status} for name, status in markers
    ]})


class TestLabSummary(unittest.TestCase):

    def test_empty_report(self):
        summary = summarize_lab_result(LabResult())
        self.assertEqual(summary["total"], 0)
        self.assertEqual(summary["score_pct"], 0)
        self.assertEqual(summary["metabolic_status"], NO_DATA)
        self.assertEqual(summary["critical_markers"], [])

    def test_counts_and_critical_markers(self):
        summary = summarize_lab_result(LabResult.from_dict(LAB_JSON))
        self.assertEqual((summary["total"], summary["normal"], summary["high"], summary["low"]), (2, 0, 1, 1))
        self.assertEqual([m["name"] for m in summary["critical_markers"]], ["LDL Cholesterol", "Vitamin D"])
        self.assertEqual(summary["metabolic_status"], "Action needed")
        self.assertEqual(summary["nutrient_status"], "Action needed")

    def test_score_rounds_half_up(self):
        lab = _lab(("Glucose", "normal"), ("HDL", "normal"), ("Iron", "high"), ("Zinc", "normal"),
                   ("CRP", "normal"), ("ESR", "normal"), ("B12", "high"), ("Folate", "normal"))
        # 6 of 8 normal
        self.assertEqual(summarize_lab_result(lab)["score_pct"], 75)
        self.assertEqual(summarize_lab_result(_lab(("Glucose", "normal"), ("LDL", "high")))["score_pct"], 50)
        self.assertEqual(summarize_lab_result(_lab(("A", "normal"), ("B", "high"), ("C", "high")))["score_pct"], 33)

    def test_family_grades(self):
        summary = summarize_lab_result(_lab(("Fasting Glucose", "normal"), ("Ferritin", "high"), ("hs-CRP", "low")))
        self.assertEqual(summary["metabolic_status"], "Optimal")
        self.assertEqual(summary["nutrient_status"], "Good")
        self.assertEqual(summary["inflammation_status"], "Low")

    def test_inflammation_elevated(self):
        summary = summarize_lab_result(_lab(("Homocysteine", "high")))
        self.assertEqual(summary["inflammation_status"], "Elevated")
        self.assertEqual(summary["nutrient_status"], NO_DATA)


if __name__ == '__main__':
    unittest.main()
